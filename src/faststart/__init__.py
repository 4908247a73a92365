"""faststart - optimize MP4 files for progressive playback.

Re-multiplexes MP4 files with ``ffmpeg -c copy -movflags +faststart`` and
swaps the optimized output into place, for a single file or a whole
directory tree.
"""

__version__ = "0.1.0"
