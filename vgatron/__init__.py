"""In-memory VGA pixel buffer with RGB565 colour bars and a Tron light-cycle game."""

__version__ = "0.1.0"
__all__ = ["board", "framebuffer", "tron"]