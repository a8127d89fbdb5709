"""
Results aggregation (tallies and winners).

Scope:
- group the aggregated rows per category
- rank nominees by vote count (stable, so ties keep nomination order)
- pick a winner, or a sentinel when there is nothing to win
"""

from __future__ import annotations

from typing import Any

from . import repository

NO_NOMINEES = "No nominees"
NO_VOTES_YET = "No votes yet"


def _sentinel(name: str) -> dict[str, Any]:
    return {"id": None, "name": name, "voteCount": 0}


def rank_tally(entries: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Sort tally entries by voteCount, highest first. `sorted` is stable, so
    entries with equal counts stay in the order they were given.
    """
    return sorted(entries, key=lambda entry: entry["voteCount"], reverse=True)


def pick_winner(tally: list[dict[str, Any]]) -> dict[str, Any]:
    if not tally:
        return _sentinel(NO_NOMINEES)
    if sum(entry["voteCount"] for entry in tally) == 0:
        return _sentinel(NO_VOTES_YET)
    return dict(tally[0])


def build_results(rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Turn rows from `repository.fetch_tally_rows` into per-category results.

    Category order follows row order. Nominees with no votes are kept with
    voteCount 0.
    """
    categories: dict[int, dict[str, Any]] = {}
    for row in rows:
        category_id = int(row["category_id"])
        category = categories.get(category_id)
        if category is None:
            category = {"categoryId": category_id, "categoryName": row["category_name"], "entries": []}
            categories[category_id] = category

        if row.get("nominee_id") is None:
            continue
        category["entries"].append(
            {
                "id": int(row["nominee_id"]),
                "name": row["nominee_name"],
                "voteCount": int(row.get("vote_count") or 0),
            }
        )

    results: list[dict[str, Any]] = []
    for category in categories.values():
        tally = rank_tally(category["entries"])
        results.append(
            {
                "categoryId": category["categoryId"],
                "categoryName": category["categoryName"],
                "totalVotes": sum(entry["voteCount"] for entry in tally),
                "winner": pick_winner(tally),
                "fullTally": tally,
            }
        )
    return results


async def winners(*, category_id: int | None = None) -> list[dict[str, Any]]:
    rows = await repository.fetch_tally_rows(category_id=category_id)
    return build_results(rows)
