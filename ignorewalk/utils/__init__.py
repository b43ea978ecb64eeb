from ignorewalk.utils.gitignore import GitignoreSpec
from ignorewalk.utils.file_ops import DirEntry, IgnoreFileRead, ReadStatus, list_directory, read_ignore_file

__all__ = ["GitignoreSpec", "DirEntry", "IgnoreFileRead", "ReadStatus", "list_directory", "read_ignore_file"]
