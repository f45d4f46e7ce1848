# smoke.py: end-to-end run against a live Cricket Auction API
import os

import requests

BASE = os.getenv("AUCTION_BASE_URL", "http://127.0.0.1:5000")


def post(path, data=None):
    r = requests.post(BASE + path, json=data or {})
    r.raise_for_status()
    return r.json()


def get(path):
    r = requests.get(BASE + path)
    r.raise_for_status()
    return r.json()


print("=== 1) health ===")
print(get("/health"))

print("=== 2) teams ===")
teams = get("/teams")
if len(teams) < 2:
    raise SystemExit("need at least two seeded teams; start the server once to seed them")
t1, t2 = teams[0], teams[1]
print("bidding teams", t1["name"], t2["name"])

print("=== 3) new player + auction ===")
created = post("/auction/new", {"name": "Smoke Player", "className": "All-Rounder", "basePrice": 500})
auction_id = created["auction"]["id"]
print("auction", auction_id, "player", created["player"]["id"])

print("=== 4) bids ===")
post(f"/auction/bid/{auction_id}", {"teamId": t1["id"], "bidAmount": 600})
post(f"/auction/bid/{auction_id}", {"teamId": t2["id"], "bidAmount": 700})
r = requests.post(BASE + f"/auction/bid/{auction_id}", json={"teamId": t1["id"], "bidAmount": 650})
print("low bid ->", r.status_code, r.json())

print("=== 5) finalize ===")
result = post(f"/auction/finalize/{auction_id}")
print(result["message"], "->", result["team"]["name"], "credits", result["team"]["credits"])

print("=== 6) standings ===")
for t in get("/teams"):
    print(f"{t['name']:<16} credits={t['credits']:<6} used={t['usedCredits']:<6} players={len(t['players'])}")

print("smoke run complete")
