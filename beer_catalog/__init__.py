"""Beer catalog service: CRUD, filtered listing and partial updates for beers."""
