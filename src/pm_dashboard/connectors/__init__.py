"""Front-end connectors (currently: interactive console)."""
