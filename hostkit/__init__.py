"""hostkit package exports."""

from hostkit.atomic import atomic_temp_file, overwrite
from hostkit.diskinfo import DiskInfo, new_disk_info
from hostkit.errors import DiskInfoError, EntropyError, FatalSecretError, HostkitError
from hostkit.rand import random_number
from hostkit.secret import Secret, new_secret

__version__ = "0.1.0"

__all__ = [
    "DiskInfo",
    "DiskInfoError",
    "EntropyError",
    "FatalSecretError",
    "HostkitError",
    "Secret",
    "atomic_temp_file",
    "new_disk_info",
    "new_secret",
    "overwrite",
    "random_number",
]
