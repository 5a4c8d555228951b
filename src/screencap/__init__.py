"""screencap: capture screens, regions and windows to image files.

The pipeline picks a capture backend per mode (in-process grab for full
screens, external tool chains for selections and windows), encodes raw
pixels to PNG or JPEG and writes them to unique, traversal-safe paths.
"""

__version__ = "0.1.0"
