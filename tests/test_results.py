import pytest
from fastapi.testclient import TestClient

from peer_review.main import app
from peer_review.core.aggregation import compute_group_results, mean_2dp
from peer_review.core.export import export_filename
from tests.helpers import create_period, create_review, seed_group_of


def test_group_results_averages(db_session):
    group, (amy, ben, cal) = seed_group_of(db_session, ["Amy", "Ben", "Cal"])
    period = create_period(db_session, is_active=True)
    create_review(db_session, reviewer=ben, reviewed=amy, period=period, q1=4, q2=2)
    create_review(db_session, reviewer=cal, reviewed=amy, period=period, q1=5, q2=3)

    client = TestClient(app)
    r = client.get(f"/results?period_id={period.id}&group_id={group.id}")
    assert r.status_code == 200
    assert r.json() == [{
        "student_id": amy.id,
        "student_name": "Amy",
        "matric_number": amy.matric_number,
        "avg_q1": 4.5,
        "avg_q2": 2.5,
        "overall_avg": 3.5,
        "review_count": 2,
    }]


def test_students_without_reviews_are_excluded(db_session):
    group, (amy, ben, cal) = seed_group_of(db_session, ["Amy", "Ben", "Cal"])
    period = create_period(db_session, is_active=True)
    create_review(db_session, reviewer=amy, reviewed=ben, period=period, q1=1, q2=1)

    results = compute_group_results(db_session, period_id=period.id, group_id=group.id)
    assert [r.student_id for r in results] == [ben.id]
    assert results[0].overall_avg == 1.0


def test_results_only_count_requested_period(db_session):
    group, (amy, ben) = seed_group_of(db_session, ["Amy", "Ben"])
    march = create_period(db_session, month=3, year=2025, is_active=True)
    feb = create_period(db_session, month=2, year=2025)
    create_review(db_session, reviewer=amy, reviewed=ben, period=march, q1=5, q2=5)
    create_review(db_session, reviewer=amy, reviewed=ben, period=feb, q1=1, q2=1)

    (result,) = compute_group_results(db_session, period_id=march.id, group_id=group.id)
    assert result.review_count == 1
    assert result.avg_q1 == 5.0

    assert compute_group_results(db_session, period_id=999, group_id=group.id) == []


def test_results_only_include_requested_group(db_session):
    alpha, (amy, ben) = seed_group_of(db_session, ["Amy", "Ben"])
    beta, (dan, eve) = seed_group_of(db_session, ["Dan", "Eve"], group_name="Beta Squad", start=11)
    period = create_period(db_session, is_active=True)
    create_review(db_session, reviewer=amy, reviewed=ben, period=period, q1=3, q2=3)
    create_review(db_session, reviewer=dan, reviewed=eve, period=period, q1=4, q2=4)

    results = compute_group_results(db_session, period_id=period.id, group_id=beta.id)
    assert [r.student_name for r in results] == ["Eve"]


def test_results_ordered_by_name(db_session):
    group, (zed, amy, mia) = seed_group_of(db_session, ["Zed", "Amy", "Mia"])
    period = create_period(db_session, is_active=True)
    create_review(db_session, reviewer=amy, reviewed=zed, period=period, q1=3, q2=3)
    create_review(db_session, reviewer=zed, reviewed=amy, period=period, q1=3, q2=3)
    create_review(db_session, reviewer=amy, reviewed=mia, period=period, q1=3, q2=3)

    results = compute_group_results(db_session, period_id=period.id, group_id=group.id)
    assert [r.student_name for r in results] == ["Amy", "Mia", "Zed"]


def test_overall_average_rounds_once(db_session):
    group, (amy, ben, cal, dan) = seed_group_of(db_session, ["Amy", "Ben", "Cal", "Dan"])
    period = create_period(db_session, is_active=True)
    # midpoints 1.5, 2.0, 2.0 -> 5.5 / 3 = 1.8333...
    create_review(db_session, reviewer=ben, reviewed=amy, period=period, q1=1, q2=2)
    create_review(db_session, reviewer=cal, reviewed=amy, period=period, q1=2, q2=2)
    create_review(db_session, reviewer=dan, reviewed=amy, period=period, q1=1, q2=3)

    (result,) = compute_group_results(db_session, period_id=period.id, group_id=group.id)
    assert result.avg_q1 == 1.33
    assert result.avg_q2 == 2.33
    assert result.overall_avg == 1.83
    assert result.review_count == 3


@pytest.mark.parametrize("total, count, expected", [
    (9, 2, 4.5),
    (17, 8, 2.13),   # 2.125 rounds half-up
    (5, 3, 1.67),
    (7, 6, 1.17),
    (0, 0, 0.0),
])
def test_mean_2dp(total, count, expected):
    assert mean_2dp(total, count) == expected


@pytest.mark.parametrize("query", [
    "",
    "?period_id=1",
    "?group_id=1",
    "?period_id=x&group_id=1",
    "?period_id=99999999999999999999&group_id=1",
    "?period_id=1&group_id=2147483648",
    "?period_id=0&group_id=1",
])
def test_results_require_period_and_group(db_session, query):
    client = TestClient(app)
    r = client.get(f"/results{query}")
    assert r.status_code == 400


def test_export_csv(db_session):
    group, (amy, ben, cal) = seed_group_of(db_session, ["Amy", "Ben", "Cal"])
    period = create_period(db_session, month=3, year=2025, is_active=True)
    create_review(db_session, reviewer=ben, reviewed=amy, period=period, q1=4, q2=2)
    create_review(db_session, reviewer=cal, reviewed=amy, period=period, q1=5, q2=3)
    create_review(db_session, reviewer=amy, reviewed=cal, period=period, q1=5, q2=5)

    client = TestClient(app)
    r = client.get(f"/results/export?period_id={period.id}&group_id={group.id}")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    assert 'filename="Alpha_Team_March_2025_results.csv"' in r.headers["content-disposition"]

    lines = r.text.strip().split("\n")
    assert lines[0] == "Student Name,Matric Number,Q1 Average,Q2 Average,Overall Average,Number of Reviews"
    assert lines[1] == f"Amy,{amy.matric_number},4.50,2.50,3.50,2"
    assert lines[2] == f"Cal,{cal.matric_number},5.00,5.00,5.00,1"
    assert len(lines) == 3


def test_export_unknown_group_404(db_session):
    period = create_period(db_session, is_active=True)

    client = TestClient(app)
    r = client.get(f"/results/export?period_id={period.id}&group_id=999")
    assert r.status_code == 404

    r = client.get(f"/results/export?period_id={period.id}&group_id=10000000000000000000000")
    assert r.status_code == 400


def test_export_filename_is_header_safe():
    assert export_filename('Team "A"; x', "March 2025") == "Team_A_x_March_2025_results.csv"
