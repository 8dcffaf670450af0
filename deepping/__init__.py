from deepping.config import VERSION

__version__ = VERSION
