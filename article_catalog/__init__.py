"""Article catalog service: CRUD plus validated, paged search over plant articles."""
