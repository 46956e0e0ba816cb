"""
JSON-file leaderboard: every submission is appended, the file keeps only the
best ``size`` entries across all games.
"""

import json
import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


class Leaderboard:

    def __init__(self, path: str, size: int = 10):
        self.path = path
        self.size = size

    def load(self) -> List[Dict[str, Any]]:
        if not os.path.exists(self.path):
            return []
        with open(self.path, "r", encoding="utf-8") as f:
            entries = json.load(f)
        if not isinstance(entries, list) or not all(
                isinstance(e, dict) and "score" in e for e in entries):
            raise ValueError(f"{self.path} is not a leaderboard file")
        return entries

    def save(self, entries: List[Dict[str, Any]]):
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(entries, f, indent=4)

    def submit(self, username: str, game: str, score: int) -> List[Dict[str, Any]]:
        """Record a score and return the trimmed board"""
        entries = self.load()
        entries.append({
            "username": username,
            "game": game,
            "score": int(score),
            "date": datetime.now(timezone.utc).isoformat(),
        })
        # stable sort: on ties the earlier entry stays ahead
        entries.sort(key=lambda e: e["score"], reverse=True)
        entries = entries[:self.size]
        self.save(entries)
        return entries

    def top(self, game: Optional[str] = None) -> List[Dict[str, Any]]:
        entries = self.load()
        if game is not None:
            entries = [e for e in entries if e["game"] == game]
        return entries
