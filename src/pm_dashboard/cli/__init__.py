"""Console front-end: composition root, slash commands and the entrypoint."""
