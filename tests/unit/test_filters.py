"""Unit tests for directory and case list filtering and dashboard figures"""
from datetime import date

import pytest

from case.domain.domain import Case
from case.views import filter_cases, share_percent, summarize_status_counts
from staff.domain.domain import StaffMember
from staff.views import filter_staff, get_staff_options


def member(staff_id, name, role, location_type, location_name):
    return StaffMember(
        id=staff_id, user_id=staff_id, password="x", name=name, email="",
        phone_number=staff_id, role=role, location_type=location_type, location_name=location_name,
    )


def case(case_id, name, address, status):
    return Case(
        id=case_id, patient_name=name, age=30, gender="Other", address=address,
        location="", diagnosis_date=date(2024, 1, 1), status=status, contact_number="",
    )


@pytest.fixture
def members():
    return [
        member("1", "Dr. Sarah Chen", "District Entomologist", "District", "Central District"),
        member("2", "James Wilson", "Medical Officer", "PHC", "West Hills PHC"),
        member("3", "Elena Rodriguez", "Health Inspector", "Block", "North Sector Block 4"),
    ]


@pytest.fixture
def cases():
    return [
        case("101", "Rahul Verma", "12/B Gandhi Nagar", "Confirmed"),
        case("102", "Priya Sharma", "Flat 402, Housing Board", "Suspected"),
        case("103", "Amit Singh", "Rural Road", "Critical"),
    ]


class TestStaffFilter:

    def test_no_filter_returns_everything_in_order(self, members):
        assert filter_staff(members, "", "All") == members

    def test_search_matches_name_role_or_location(self, members):
        assert [m.id for m in filter_staff(members, "chen")] == ["1"]
        assert [m.id for m in filter_staff(members, "medical")] == ["2"]
        assert [m.id for m in filter_staff(members, "SECTOR")] == ["3"]

    def test_location_type_filter(self, members):
        assert [m.id for m in filter_staff(members, "", "PHC")] == ["2"]
        assert filter_staff(members, "chen", "PHC") == []

    def test_options(self):
        options = get_staff_options()

        assert options["location_filters"][0] == "All"
        assert "Data Manager" in options["designations"]


class TestCaseFilter:

    def test_all_returns_everything_in_order(self, cases):
        assert filter_cases(cases, "All", "") == cases

    def test_status_filter(self, cases):
        assert [c.id for c in filter_cases(cases, "Critical")] == ["103"]

    def test_search_matches_name_or_address(self, cases):
        assert [c.id for c in filter_cases(cases, "All", "housing")] == ["102"]
        assert [c.id for c in filter_cases(cases, "All", "verma")] == ["101"]
        assert filter_cases(cases, "Suspected", "verma") == []


class TestDashboardFigures:

    @pytest.mark.parametrize("value,total,expected", [(1, 3, 33), (2, 3, 67), (1, 8, 13), (0, 0, 0), (5, 0, 0)])
    def test_share_percent(self, value, total, expected):
        assert share_percent(value, total) == expected

    def test_summary_counts_every_status(self):
        summary = summarize_status_counts({"Confirmed": 2, "Critical": 1, "Recovered": 1})

        assert summary["total"] == 4
        assert [(k["status"], k["value"], k["percent"]) for k in summary["kpis"]] == [
            ("Confirmed", 2, 50),
            ("Suspected", 0, 0),
            ("Recovered", 1, 25),
            ("Critical", 1, 25),
        ]
        assert summary["quick_links"] == [
            {"label": "Directory", "status": "All"},
            {"label": "Priority", "status": "Critical"},
        ]

    def test_empty_summary(self):
        summary = summarize_status_counts({})

        assert summary["total"] == 0
        assert all(k["percent"] == 0 for k in summary["kpis"])
