from .version import __version__ as __version__

__title__ = "rc4kit"
__description__ = "RC4 stream cipher and a file encryption command-line tool."
__license__ = "Apache-2.0"
