"""Seed the outing: create the schema, the default teams and (optionally) a roster.
    pip install -e .
    python3 data/seed_game.py
    python3 data/seed_game.py data/roster.json

The roster is a JSON list of {"name": ..., "handicap": ..., "team": <team name>}.
The first player listed for a team becomes its captain.
"""

import asyncio
import json
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from models import User
from database.connection import DatabasePool
from database.db_manager import DatabaseManager


async def seed(roster_path: str = None, dsn: str = None):
    roster = []
    if roster_path:
        with open(roster_path) as f:
            roster = json.load(f)
        print(f"Loaded {len(roster)} players from JSON")

    pool = DatabasePool()
    await pool.initialize(dsn=dsn)
    db = DatabaseManager(pool.pool)

    try:
        await pool.apply_schema()

        created, teams = await db.teams.seed_teams()
        print("Teams seeded" if created else "Teams already seeded")
        team_map = {t.name: t for t in teams}
        for team in teams:
            print(f"  {team.name} ({team.id})")

        added = 0
        skipped = 0
        for entry in roster:
            team = team_map.get(entry["team"])
            if not team:
                print(f"  SKIP: no team named '{entry['team']}'")
                skipped += 1
                continue

            members = await db.users.get_team_members(team.id)
            if any(m.name == entry["name"] for m in members):
                print(f"  EXISTS: {entry['name']} on {team.name}, skipping")
                skipped += 1
                continue

            user = await db.users.create_user(User(
                name=entry["name"],
                handicap=entry.get("handicap", 0),
                team_id=team.id,
                avatar_url=entry.get("avatar_url"),
            ))
            added += 1
            print(f"  {user.name} -> {team.name} ({user.role.value}, hcp {user.handicap})")

        print(f"\nDone: {added} players added, {skipped} skipped")

    finally:
        await pool.close()


def main():
    if len(sys.argv) > 2:
        print("Usage: python data/seed_game.py [roster.json]")
        sys.exit(1)

    load_dotenv()
    roster_path = sys.argv[1] if len(sys.argv) == 2 else None
    dsn = os.environ.get("DATABASE_URL")

    asyncio.run(seed(roster_path, dsn))


if __name__ == "__main__":
    main()
