# tests/test_teams_players_api.py


def test_create_and_fetch_team(client):
    r = client.post("/team", json={"name": "IMJ Titans"})
    assert r.status_code == 200, r.text
    team = r.json()
    assert team["name"] == "IMJ Titans"

    r = client.get(f"/team/{team['id']}")
    assert r.status_code == 200
    assert r.json()["name"] == "IMJ Titans"

    for missing in (9999, 0):
        r = client.get(f"/team/{missing}")
        assert r.status_code == 404
        assert r.json() == {"error": "Team not found"}


def test_duplicate_team_name_conflicts(client):
    assert client.post("/team", json={"name": "Hawks"}).status_code == 200
    r = client.post("/team", json={"name": "Hawks"})
    assert r.status_code == 409
    assert r.json() == {"error": "Team name already exists"}


def test_empty_team_name_is_rejected(client):
    r = client.post("/team", json={"name": ""})
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid request"


def test_team_by_name_is_case_insensitive_exact(client):
    client.post("/team", json={"name": "IMJ NINJAS"})
    client.post("/team", json={"name": "IMJ NINJAS II"})

    r = client.get("/team/byName/imj ninjas")
    assert r.status_code == 200, r.text
    assert r.json()["name"] == "IMJ NINJAS"

    # no prefix / substring matching
    assert client.get("/team/byName/imj").status_code == 404
    r = client.get("/team/byName/NINJAS")
    assert r.status_code == 404
    assert r.json() == {"error": "Team not found"}


def test_list_teams_resolves_players(client):
    t1 = client.post("/team", json={"name": "One"}).json()
    client.post("/team", json={"name": "Two"})

    auction = client.post("/auction/new", json={"name": "Kohli", "className": "Batsman", "basePrice": 2000}).json()
    client.post(f"/auction/bid/{auction['auction']['id']}", json={"teamId": t1["id"], "bidAmount": 3000})
    client.post(f"/auction/finalize/{auction['auction']['id']}")

    teams = {t["name"]: t for t in client.get("/teams").json()}
    assert set(teams) == {"One", "Two"}
    assert teams["Two"]["players"] == []
    (kohli,) = teams["One"]["players"]
    assert kohli["name"] == "Kohli"
    assert kohli["className"] == "Batsman"
    assert kohli["soldPrice"] == 3000


def test_players_list_has_null_team_when_unsold(client):
    client.post("/player", json={"name": "Chahal", "className": "Bowler", "basePrice": 1000})
    (p,) = client.get("/players").json()
    assert p["team"] is None
    assert p["teamId"] is None
    assert p["basePrice"] == 1000


def test_players_csv_import(client):
    csv_text = """name,className,basePrice
Yuzvendra Chahal,Bowler,1000
Dinesh Karthik,Wicket-Keeper,900
,Batsman,100
Broken Price,Batsman,abc
Infinite Price,Batsman,inf
Huge Price,Batsman,1e30
"""
    r = client.post("/players/import_csv", json={"csv": csv_text})
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["ok"] is True
    assert [p["name"] for p in data["created"]] == ["Yuzvendra Chahal", "Dinesh Karthik"]
    assert [s["reason"] for s in data["skipped"]] == ["missing_name"] + ["bad_base_price"] * 3
    assert [s["line"] for s in data["skipped"]] == [4, 5, 6, 7]

    names = sorted(p["name"] for p in client.get("/players").json())
    assert names == ["Dinesh Karthik", "Yuzvendra Chahal"]


def test_players_csv_import_requires_columns(client):
    r = client.post("/players/import_csv", json={"csv": "player,price\nX,1\n"})
    assert r.status_code == 400
    assert "basePrice" in r.json()["error"]
