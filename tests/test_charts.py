from budget_core.charts import category_pie, monthly_pie
from budget_core.reports import MonthlySummary


def _pie_labels(fig):
    return [text.get_text() for text in fig.axes[0].texts]


def test_monthly_pie_has_income_and_expense_slices():
    fig = monthly_pie(MonthlySummary(1, 2024, income=300.0, expense=100.0))

    assert len(fig.axes[0].patches) == 2
    labels = _pie_labels(fig)
    assert "Income (75.0%)" in labels
    assert "Expenses (25.0%)" in labels


def test_monthly_pie_without_data_shows_message():
    fig = monthly_pie(MonthlySummary(1, 2024, income=0.0, expense=0.0))

    assert len(fig.axes[0].patches) == 0
    assert _pie_labels(fig) == ["No data available for selected month"]


def test_category_pie_has_one_slice_per_category():
    fig = category_pie({"Food": 150.0, "Rent": 850.0}, title="January 2024")

    assert len(fig.axes[0].patches) == 2
    assert {"Food", "Rent"} <= set(_pie_labels(fig))
    assert fig.axes[0].get_title() == "January 2024"


def test_category_pie_without_data_shows_message():
    fig = category_pie({})

    assert _pie_labels(fig) == ["No expense data available"]


def test_monthly_pie_with_negative_expense_shows_message():
    fig = monthly_pie(MonthlySummary(1, 2024, income=100.0, expense=-20.0))

    assert len(fig.axes[0].patches) == 0
    assert _pie_labels(fig) == ["Cannot chart negative amounts"]


def test_monthly_pie_with_zero_sum_shows_message():
    fig = monthly_pie(MonthlySummary(1, 2024, income=50.0, expense=-50.0))

    assert _pie_labels(fig) == ["Cannot chart negative amounts"]


def test_category_pie_with_negative_total_shows_message():
    fig = category_pie({"Food": -5.0, "Rent": 2.0})

    assert len(fig.axes[0].patches) == 0
    assert _pie_labels(fig) == ["Cannot chart negative amounts"]
