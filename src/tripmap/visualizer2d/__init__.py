"""Rendering side: markers/paths, MapContext, tile overlay and the CLI."""
