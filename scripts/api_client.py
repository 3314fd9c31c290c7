"""Lightweight REST client for the auctionboard API."""

from __future__ import annotations

import argparse
import json

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Fetch the combined roster from the auctionboard API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:3000")
    parser.add_argument("--team", default=None, help="Only print players from this team")
    parser.add_argument("--top", type=int, default=None, help="Print the top N players by runs")
    parser.add_argument("--raw", action="store_true", help="Dump the JSON payload as returned")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        resp = client.get("/api/players")
        if resp.status_code == 503:
            raise SystemExit(resp.json().get("message", "player data unavailable"))
        resp.raise_for_status()
        players = resp.json()

    if args.team:
        players = [player for player in players if player.get("team") == args.team]
    if args.top:
        players = sorted(players, key=lambda player: player.get("runs") or 0, reverse=True)[: args.top]

    if args.raw:
        print(json.dumps(players, indent=2))
        return

    print(f"Received {len(players)} players")
    for player in players:
        print(
            f"{player.get('name', ''):<28} {player.get('team') or '-':<24} "
            f"{player.get('priceCr') or 'N/A':>6} Cr  runs={player.get('runs')} wickets={player.get('wickets')}"
        )


if __name__ == "__main__":
    main()
