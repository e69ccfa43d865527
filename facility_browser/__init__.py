"""Collection point browser: waste type filtering and selection over two views."""
