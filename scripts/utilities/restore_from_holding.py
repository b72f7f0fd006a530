#!/usr/bin/env python3
"""
Restore script for the holding directory.

Moves originals that an archiving run relocated into the holding directory
back to their mirrored place in the document tree. Files whose original
location is occupied again are left in the holding directory.

Files are restored under their held name. A file that was held with a
collision suffix (a_1.xml next to an earlier a.xml) comes back as a_1.xml,
so both generations survive the restore.
"""

import sys
import shutil
import argparse
from pathlib import Path
from typing import List, Tuple

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


def restore_held_files(root: Path, holding_dir: Path, dry_run: bool = False) -> Tuple[List[Path], List[Path]]:
    """
    Move every file below holding_dir back under root.
    
    Args:
        root: Document tree root
        holding_dir: Holding directory (usually root/deleted)
        dry_run: Only report what would be restored
        
    Returns:
        (restored destinations, held files left in place because of a conflict)
    """
    restored: List[Path] = []
    conflicts: List[Path] = []
    if not holding_dir.exists():
        return restored, conflicts
    
    for held in sorted(p for p in holding_dir.rglob("*") if p.is_file()):
        destination = root / held.relative_to(holding_dir)
        if destination.exists():
            print(f"[SKIP] {destination} already exists, keeping {held}")
            conflicts.append(held)
            continue
        
        if dry_run:
            print(f"[DRY-RUN] would restore {held} -> {destination}")
        else:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(held), str(destination))
            print(f"[OK] Restored {destination}")
        restored.append(destination)
    
    if not dry_run:
        _remove_empty_dirs(holding_dir)
    return restored, conflicts


def _remove_empty_dirs(holding_dir: Path) -> None:
    for directory in sorted((p for p in holding_dir.rglob("*") if p.is_dir()), reverse=True):
        if not any(directory.iterdir()):
            directory.rmdir()


def main():
    """Main function."""
    parser = argparse.ArgumentParser(description="Restore archived originals from the holding directory")
    parser.add_argument("--root", type=str, default=None,
                        help="Document tree root (default: parent of the working directory)")
    parser.add_argument("--holding-dir", type=str, default="deleted",
                        help="Holding directory name below root (default: deleted)")
    parser.add_argument("--dry-run", action="store_true", help="Only report what would be restored")
    args = parser.parse_args()
    
    root = Path(args.root) if args.root else Path.cwd().parent
    restored, conflicts = restore_held_files(root, root / args.holding_dir, dry_run=args.dry_run)
    
    print(f"\nRestored: {len(restored)}, conflicts: {len(conflicts)}")
    sys.exit(1 if conflicts else 0)


if __name__ == "__main__":
    main()
