"""Infrastructure layer: HTTP transport and the response trace sink.

This layer depends on stdlib and third-party libs (httpx).
It must never import from commands or output.
"""
