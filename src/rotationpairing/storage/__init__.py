from rotationpairing.storage.csv_files import (
    read_history_csv,
    read_roster_file,
    roster_from_names,
    write_history_csv,
    write_roster_file,
)
from rotationpairing.storage.state_file import load_config, load_rotation, save_rotation

__all__ = [
    "read_history_csv",
    "write_history_csv",
    "read_roster_file",
    "write_roster_file",
    "roster_from_names",
    "load_config",
    "load_rotation",
    "save_rotation",
]
