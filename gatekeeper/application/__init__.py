"""Application layer: account commands, handlers and the request pipeline."""
