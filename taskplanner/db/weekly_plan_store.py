# taskplanner/db/weekly_plan_store.py

from datetime import date
from pathlib import Path
from typing import Iterator, Optional, Tuple

from taskplanner.core.dates import format_week_key, parse_week_key
from taskplanner.db.files import read_text, remove_file, write_text_atomic

PLAN_SUFFIX = ".md"


class WeeklyPlanStore:
    """One markdown document per week under ``root``, named ``DD-MMM-YYYY.md``."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def path_for(self, week_start: date) -> Path:
        return self.root / f"{format_week_key(week_start)}{PLAN_SUFFIX}"

    def exists(self, week_start: date) -> bool:
        return self.path_for(week_start).is_file()

    def read(self, week_start: date) -> Optional[str]:
        path = self.path_for(week_start)
        if not path.is_file():
            return None
        return read_text(path)

    def write(self, week_start: date, text: str) -> None:
        write_text_atomic(self.path_for(week_start), text)

    def delete(self, week_start: date) -> None:
        remove_file(self.path_for(week_start))

    def entries(self) -> Iterator[Tuple[date, Path]]:
        """Yield ``(week_start, path)`` for every file with a well-formed key."""
        if not self.root.is_dir():
            return
        for path in self.root.glob(f"*{PLAN_SUFFIX}"):
            week_start = parse_week_key(path.name[: -len(PLAN_SUFFIX)])
            if week_start is None:
                continue
            yield week_start, path
