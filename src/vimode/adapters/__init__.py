"""Host adapters layered on top of the controller's polled state."""
