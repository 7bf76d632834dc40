"""Services Layer — one handler per product CRUD operation."""
