from datetime import date

import pytest

from app.extensions import db


@pytest.fixture
def delegate(make_user):
    return make_user()


@pytest.fixture
def competition(make_competition, delegate):
    return make_competition(
        id="TestComp2014",
        starts=date(2014, 2, 3),
        days=3,
        external_website="http://example.com",
        delegates=[delegate],
    )


@pytest.fixture
def hidden_competition(make_competition, delegate):
    return make_competition(id="HiddenComp2014", visible=False, delegates=[delegate])


def wcif_url(competition_id):
    return f"/api/v0/competitions/{competition_id}/wcif"


def test_404s_on_invalid_competition(client):
    resp = client.get(wcif_url("FakeId2014"))
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Competition with id FakeId2014 not found"


def test_404s_on_hidden_competition(client, competition):
    competition.show_at_all = False
    db.session.commit()

    resp = client.get(wcif_url("TestComp2014"))
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Competition with id TestComp2014 not found"


def test_anonymous_on_visible_competition_is_forbidden(client, competition):
    resp = client.get(wcif_url("TestComp2014"))
    assert resp.status_code == 403


class TestWithoutManageScope:
    @pytest.fixture
    def headers(self, auth_headers, delegate):
        return auth_headers(delegate, scopes=("public",))

    def test_404s_on_hidden_competition(self, client, headers, hidden_competition):
        resp = client.get(wcif_url(hidden_competition.id), headers=headers)
        assert resp.status_code == 404

    def test_get_wcif_is_forbidden(self, client, headers, competition):
        resp = client.get(wcif_url("TestComp2014"), headers=headers)
        assert resp.status_code == 403
        assert "manage_competitions" in resp.get_json()["error"]


class TestSignedInAsDelegate:
    @pytest.fixture
    def headers(self, auth_headers, delegate):
        return auth_headers(delegate)

    def test_does_not_404_on_their_own_hidden_competition(self, client, headers, hidden_competition):
        resp = client.get(wcif_url(hidden_competition.id), headers=headers)
        assert resp.status_code == 200
        assert resp.get_json()["id"] == "HiddenComp2014"

    def test_get_wcif(self, client, headers, competition):
        resp = client.get(wcif_url("TestComp2014"), headers=headers)
        assert resp.status_code == 200
        assert resp.get_json() == {"formatVersion": "1.0", "id": "TestComp2014"}


def test_scoped_stranger_is_forbidden_on_visible_competition(client, auth_headers, make_user, competition):
    resp = client.get(wcif_url("TestComp2014"), headers=auth_headers(make_user()))
    assert resp.status_code == 403


def test_scoped_stranger_gets_404_on_hidden_competition(client, auth_headers, make_user, hidden_competition):
    resp = client.get(wcif_url(hidden_competition.id), headers=auth_headers(make_user()))
    assert resp.status_code == 404


def test_admin_gets_any_wcif(client, auth_headers, make_user, hidden_competition):
    admin = make_user(is_admin=True)
    resp = client.get(wcif_url(hidden_competition.id), headers=auth_headers(admin))
    assert resp.status_code == 200
