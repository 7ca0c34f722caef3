"""Style snapshot export and import."""
from layout_styles.transfer.snapshot import (
    SNAPSHOT_VERSION,
    SnapshotMetadata,
    StyleSnapshot,
    export_filename,
    export_snapshot,
    import_snapshot,
    parse_snapshot,
    read_snapshot_file,
    write_snapshot,
)

__all__ = [
    "SNAPSHOT_VERSION",
    "SnapshotMetadata",
    "StyleSnapshot",
    "export_filename",
    "export_snapshot",
    "import_snapshot",
    "parse_snapshot",
    "read_snapshot_file",
    "write_snapshot",
]
