"""
회사 모델/API 테스트
"""
import asyncio
from decimal import Decimal

import pytest

from db.models.company import Company
from utils.errors import AppError, ErrorKind


def run(coro):
    return asyncio.run(coro)


class TestCompanyModel:

    def test_create(self, fake_conn, company_rows):
        fake_conn.results = [[], company_rows[:1]]

        company = run(Company.create(fake_conn, handle="c1", name="C1", description="Desc1",
                                     num_employees=1, logo_url="http://c1.img"))

        assert company == company_rows[0]
        assert fake_conn.calls[1][1] == ("c1", "C1", "Desc1", 1, "http://c1.img")

    def test_create_duplicate(self, fake_conn):
        fake_conn.results = [[{"handle": "c1"}]]

        with pytest.raises(AppError) as exc_info:
            run(Company.create(fake_conn, handle="c1", name="C1"))

        assert exc_info.value.kind is ErrorKind.BAD_REQUEST
        assert len(fake_conn.calls) == 1

    def test_find_all_filters(self, fake_conn):
        run(Company.find_all(fake_conn, name_like="c", min_employees=2, max_employees=3))

        query, args = fake_conn.calls[0]
        assert "WHERE (LOWER(name) LIKE $1 AND num_employees >= $2 AND num_employees <= $3)" in query
        assert "ORDER BY name" in query
        assert args == ("%c%", 2, 3)

    def test_find_all_invalid_range(self, fake_conn):
        with pytest.raises(AppError) as exc_info:
            run(Company.find_all(fake_conn, min_employees=5, max_employees=1))

        assert exc_info.value.kind is ErrorKind.BAD_REQUEST
        assert fake_conn.calls == []

    def test_get_includes_jobs(self, fake_conn, company_rows):
        jobs = [{"id": 1, "title": "j1", "salary": 100000, "equity": Decimal("0")}]
        fake_conn.results = [company_rows[:1], jobs]

        company = run(Company.get(fake_conn, "c1"))

        assert company == {**company_rows[0], "jobs": jobs}

    def test_get_not_found(self, fake_conn):
        with pytest.raises(AppError) as exc_info:
            run(Company.get(fake_conn, "nope"))

        assert exc_info.value.kind is ErrorKind.NOT_FOUND

    def test_update_maps_columns(self, fake_conn, company_rows):
        fake_conn.results = [company_rows[:1]]

        run(Company.update(fake_conn, "c1", {"numEmployees": 10, "description": None, "logoUrl": "http://new.img"}))

        query, args = fake_conn.calls[0]
        assert 'SET "num_employees"=$1, "description"=$2, "logo_url"=$3' in query
        assert "WHERE handle = $4" in query
        assert args == (10, None, "http://new.img", "c1")

    def test_update_handle(self, fake_conn):
        with pytest.raises(AppError) as exc_info:
            run(Company.update(fake_conn, "c1", {"handle": "c9"}))

        assert exc_info.value.kind is ErrorKind.BAD_REQUEST

    def test_update_no_data(self, fake_conn):
        with pytest.raises(AppError) as exc_info:
            run(Company.update(fake_conn, "c1", {}))

        assert exc_info.value.kind is ErrorKind.BAD_REQUEST
        assert fake_conn.calls == []

    def test_update_not_found(self, fake_conn):
        with pytest.raises(AppError) as exc_info:
            run(Company.update(fake_conn, "nope", {"name": "New"}))

        assert exc_info.value.kind is ErrorKind.NOT_FOUND

    def test_remove_not_found(self, fake_conn):
        with pytest.raises(AppError) as exc_info:
            run(Company.remove(fake_conn, "nope"))

        assert exc_info.value.kind is ErrorKind.NOT_FOUND


class TestCompaniesApi:

    def test_create(self, client, fake_conn, admin_headers, company_rows):
        fake_conn.results = [[], company_rows[:1]]
        new_company = {
            "handle": "c1",
            "name": "C1",
            "description": "Desc1",
            "numEmployees": 1,
            "logoUrl": "http://c1.img",
        }

        response = client.post("/companies", json=new_company, headers=admin_headers)

        assert response.status_code == 201
        assert response.json() == {"company": new_company}

    def test_create_unauthorized(self, client, fake_conn, user_headers):
        response = client.post("/companies", json={"handle": "c9", "name": "C9"}, headers=user_headers)

        assert response.status_code == 401
        assert response.json() == {"detail": "admin required"}
        assert fake_conn.calls == []

    def test_create_employees_out_of_range(self, client, fake_conn, admin_headers):
        response = client.post("/companies", json={"handle": "c9", "name": "C9", "numEmployees": 2_147_483_648},
                               headers=admin_headers)

        assert response.status_code == 400
        assert fake_conn.calls == []

    def test_list_stored_row_outside_input_limits(self, client, fake_conn):
        stored = {"handle": "Legacy_Co", "name": "N" * 300, "description": None,
                  "numEmployees": None, "logoUrl": "not a url"}
        fake_conn.results = [[stored]]

        response = client.get("/companies")

        assert response.status_code == 200
        assert response.json() == {"companies": [stored]}

    def test_list_min_employees_out_of_range(self, client, fake_conn):
        response = client.get("/companies?minEmployees=99999999999")

        assert response.status_code == 400
        assert fake_conn.calls == []

    def test_list_with_filters(self, client, fake_conn, company_rows):
        fake_conn.results = [company_rows[1:]]

        response = client.get("/companies?nameLike=C&minEmployees=2&maxEmployees=3")

        assert response.status_code == 200
        assert [c["handle"] for c in response.json()["companies"]] == ["c2", "c3"]
        assert fake_conn.calls[0][1] == ("%C%", 2, 3)

    def test_list_invalid_range(self, client, fake_conn):
        response = client.get("/companies?minEmployees=5&maxEmployees=1")

        assert response.status_code == 400
        assert fake_conn.calls == []

    def test_get(self, client, fake_conn, company_rows):
        fake_conn.results = [company_rows[:1], [{"id": 1, "title": "j1", "salary": 100000, "equity": Decimal("0")}]]

        response = client.get("/companies/c1")

        assert response.status_code == 200
        company = response.json()["company"]
        assert company["numEmployees"] == 1
        assert company["jobs"] == [{"id": 1, "title": "j1", "salary": 100000, "equity": "0"}]

    def test_get_not_found(self, client):
        response = client.get("/companies/nope")
        assert response.status_code == 404

    def test_update(self, client, fake_conn, admin_headers, company_rows):
        fake_conn.results = [[{**company_rows[0], "name": "C1-new"}]]

        response = client.patch("/companies/c1", json={"name": "C1-new"}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["company"]["name"] == "C1-new"
        assert fake_conn.calls[0][1] == ("C1-new", "c1")

    def test_update_null_name(self, client, fake_conn, admin_headers):
        response = client.patch("/companies/c1", json={"name": None}, headers=admin_headers)

        assert response.status_code == 400
        assert fake_conn.calls == []

    def test_update_null_description(self, client, fake_conn, admin_headers, company_rows):
        fake_conn.results = [[{**company_rows[0], "description": None}]]

        response = client.patch("/companies/c1", json={"description": None}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["company"]["description"] is None
        assert fake_conn.calls[0][1] == (None, "c1")

    def test_update_handle(self, client, fake_conn, admin_headers):
        response = client.patch("/companies/c1", json={"handle": "c1-new"}, headers=admin_headers)

        assert response.status_code == 400
        assert fake_conn.calls == []

    def test_delete(self, client, fake_conn, admin_headers):
        fake_conn.results = [[{"handle": "c1"}]]

        response = client.delete("/companies/c1", headers=admin_headers)

        assert response.json() == {"deleted": "c1"}

    def test_delete_unauth_for_anon(self, client):
        response = client.delete("/companies/c1")
        assert response.status_code == 401
