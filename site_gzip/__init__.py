from site_gzip.compressor import compress_directory, compress_file, compress_site, directory_files
from site_gzip.config import DEFAULT_EXTENSIONS, is_zippable, zippable_extensions
from site_gzip.site import DirectorySite, StaticFile

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_EXTENSIONS",
    "DirectorySite",
    "StaticFile",
    "compress_directory",
    "compress_file",
    "compress_site",
    "directory_files",
    "is_zippable",
    "zippable_extensions",
]
