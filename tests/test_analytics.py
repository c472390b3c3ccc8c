from insights.models.analytics import ServerAggregates
from insights.services.analytics_service import compute_analytics, rent_trends

from conftest import make_record


def test_empty_aggregates_default_to_zero():
    summary = compute_analytics([], {})
    assert summary.total_revenue == 0
    assert summary.avg_occupancy == "0"
    assert summary.avg_score == "0"
    assert summary.total_properties == 0
    assert len(summary.rent_trends) == 6
    assert summary.rent_trends[5].avg_rent == 2750


def test_default_trend_matches_historical_floors():
    assert [p.avg_rent for p in rent_trends(None)] == [2400, 2450, 2500, 2600, 2700, 2750]
    assert [p.month for p in rent_trends(None)] == ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]


def test_trend_subtracts_offsets_above_floors():
    points = rent_trends(3500)
    assert [p.avg_rent for p in points] == [3150, 3200, 3250, 3350, 3450, 3500]


def test_trend_floors_low_live_rent():
    points = rent_trends(1000)
    assert [p.avg_rent for p in points] == [2400, 2450, 2500, 2600, 2700, 1000]


def test_aggregates_formatted_to_one_decimal():
    aggregates = {
        "totalRevenue": 7500,
        "averageOccupancy": 91.6667,
        "averageScore": 83.66,
        "totalProperties": 3,
        "averageRent": 2500,
    }
    summary = compute_analytics([], aggregates)
    assert summary.total_revenue == 7500
    assert summary.avg_occupancy == "91.7"
    assert summary.avg_score == "83.7"
    assert summary.total_properties == 3
    assert summary.rent_trends[-1].avg_rent == 2500


def test_zero_average_occupancy_still_formats():
    summary = compute_analytics([], ServerAggregates(average_occupancy=0))
    assert summary.avg_occupancy == "0.0"


def test_property_types_first_seen_order():
    records = [
        make_record(id="1", property_type="Apartment"),
        make_record(id="2", property_type="House"),
        make_record(id="3", property_type="Apartment"),
    ]
    summary = compute_analytics(records, None)
    assert [(c.name, c.value) for c in summary.property_types] == [("Apartment", 2), ("House", 1)]


def test_property_types_ignore_server_aggregates():
    records = [make_record(id="1", property_type="Studio")]
    summary = compute_analytics(records, {"totalProperties": 40})
    assert [(c.name, c.value) for c in summary.property_types] == [("Studio", 1)]


def test_identical_inputs_give_identical_output():
    records = [make_record(id="1"), make_record(id="2", property_type="House")]
    aggregates = {"averageRent": 2900, "averageScore": 80}
    assert compute_analytics(records, aggregates).model_dump_json() == compute_analytics(records, aggregates).model_dump_json()
