from app.components.cards import OCCUPANCY_TREND, REVENUE_TREND, detail_card_html, stat_cards
from insights.services.analytics_service import compute_analytics

from conftest import make_record


def test_detail_card_escapes_server_text():
    record = make_record(address="<script>alert(1)</script> Main St", property_type="House & Garden")
    markup = detail_card_html(record)
    assert "<script>" not in markup
    assert "&lt;script&gt;alert(1)&lt;/script&gt; Main St" in markup
    assert "House &amp; Garden" in markup


def test_stat_cards_carry_trend_captions():
    summary = compute_analytics([], {"totalRevenue": 12345, "averageOccupancy": 87.5, "totalProperties": 4})
    cards = stat_cards(summary)
    assert [c.label for c in cards] == [
        "Total Monthly Revenue",
        "Total Properties",
        "Avg Occupancy Rate",
        "Avg Performance Score",
    ]
    assert cards[0].value == "$12,345"
    assert cards[0].trend == REVENUE_TREND
    assert cards[1].trend is None
    assert cards[2].value == "87.5%"
    assert cards[2].trend == OCCUPANCY_TREND
    assert cards[3].value == "0"
