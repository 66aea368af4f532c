"""Skip reason enum for entries omitted from a directory listing."""

from enum import Enum


class SkipReason(str, Enum):
    """Why an entry attempted during traversal did not make it into the listing.

    Values:
        EXCLUDED: A directory whose name matched the exclusion rules
        STAT_FAILED: Metadata could not be read (broken symlink, permission denied)
        UNREADABLE_DIRECTORY: The directory itself could not be enumerated
        DEPTH_EXCEEDED: The call depth was beyond the maximum depth
    """

    EXCLUDED = "excluded"
    STAT_FAILED = "stat_failed"
    UNREADABLE_DIRECTORY = "unreadable_directory"
    DEPTH_EXCEEDED = "depth_exceeded"
