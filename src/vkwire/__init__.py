"""vkwire: VK API client with tolerant wire decoding."""

__version__ = "0.3.0"

# VK API version sent as the ``v`` parameter on every call.
API_VERSION = "5.131"
