"""
Automatic .env file loader.

Lets SEMD_MONTH / SEMD_YEAR overrides live in a .env file next to the
program instead of the shell environment.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def load_env_automatically(project_root: Optional[Path] = None) -> bool:
    """
    Load the .env file from the project root, if there is one.
    
    Variables already set in the environment are not overridden.
    
    Args:
        project_root: Directory holding .env (default: two levels above src/utils)
        
    Returns:
        True if a .env file was loaded
    """
    if project_root is None:
        project_root = Path(__file__).parent.parent.parent
    
    env_file = project_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)
        return True
    return False
