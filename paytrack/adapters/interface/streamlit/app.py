"""Streamlit entry point for the personal finance tracker."""

from collections.abc import Callable, Sequence
from datetime import date, datetime, time
from decimal import Decimal

import streamlit as st
import altair as alt

from paytrack.adapters.interface.streamlit.presenters import (
    DEFAULT_PALETTE,
    bank_account_rows,
    day_summary_rows,
    debt_rows,
    expense_rows,
    format_hours,
    format_money,
    income_vs_expenses_data,
    option_labels,
    prepare_category_chart_data,
    work_entry_rows,
)
from paytrack.application.use_cases.get_dashboard_summary import (
    DashboardView,
    GetDashboardSummaryUseCase,
)
from paytrack.application.use_cases.get_earnings_summary import (
    GetEarningsSummaryUseCase,
    TimesheetView,
)
from paytrack.application.use_cases.get_expense_breakdown import (
    ExpensesView,
    GetExpenseBreakdownUseCase,
)
from paytrack.application.use_cases.manage_accounts import (
    AccountsView,
    ManageAccountsUseCase,
)
from paytrack.application.use_cases.manage_debts import (
    DebtsView,
    ManageDebtsUseCase,
)
from paytrack.application.use_cases.manage_expenses import (
    DeleteExpenseUseCase,
    ExpenseForm,
    SaveExpenseUseCase,
)
from paytrack.application.use_cases.manage_work_entries import (
    DeleteWorkEntryUseCase,
    SaveWorkEntryUseCase,
    WorkEntryForm,
)
from paytrack.application.use_cases.toggle_paid_status import (
    TogglePaidStatusUseCase,
)
from paytrack.domain.constants import (
    AccountType,
    DebtType,
    ExpenseCategory,
    PaymentMethod,
)
from paytrack.domain.exceptions import (
    GatewayError,
    InvalidTimeRangeError,
    ValidationError,
)
from paytrack.domain.models import ExpenseBreakdown, WorkEntry
from paytrack.domain.services.periods import month_window, shift_month
from paytrack.domain.services.time_window import compute_hours
from paytrack.infrastructure.container import (
    build_accounts_repository,
    build_database_adapter,
    build_debts_repository,
    build_expenses_repository,
    build_profiles_repository,
    build_timesheets_repository,
)
from paytrack.infrastructure.logging.logger import get_usage_logger
from paytrack.infrastructure.settings import FinanceSettings

PAGES = ["Dashboard", "Timesheets", "Expenses", "Accounts", "Debts", "Stats"]
ALL_JOBS = "All jobs"


def _fetch_dashboard(reference: date) -> DashboardView:
    """Fetch the dashboard for the month containing ``reference``."""
    settings = FinanceSettings.from_env()
    adapter = build_database_adapter()
    use_case = GetDashboardSummaryUseCase(
        accounts_repository=build_accounts_repository(adapter),
        timesheets_repository=build_timesheets_repository(adapter),
        expenses_repository=build_expenses_repository(adapter),
        profiles_repository=build_profiles_repository(adapter),
        recent_limit=settings.recent_expenses_limit,
    )
    return use_case.execute(reference)


@st.cache_data(show_spinner=False)
def _load_dashboard(reference: date, schema_version: int = 1) -> DashboardView:
    """Cached wrapper around _fetch_dashboard."""
    _ = schema_version
    return _fetch_dashboard(reference)


def _fetch_timesheet_view(start_date: date, end_date: date) -> TimesheetView:
    """Fetch work entries and their summary for a window."""
    use_case = GetEarningsSummaryUseCase(build_timesheets_repository())
    return use_case.execute(start_date, end_date)


@st.cache_data(show_spinner=False)
def _load_timesheet_view(
    start_date: date,
    end_date: date,
    schema_version: int = 1,
) -> TimesheetView:
    """Cached wrapper around _fetch_timesheet_view."""
    _ = schema_version
    return _fetch_timesheet_view(start_date, end_date)


def _fetch_expenses_view(start_date: date, end_date: date) -> ExpensesView:
    """Fetch expenses grouped by day and category for a window."""
    use_case = GetExpenseBreakdownUseCase(build_expenses_repository())
    return use_case.execute(start_date, end_date)


@st.cache_data(show_spinner=False)
def _load_expenses_view(
    start_date: date,
    end_date: date,
    schema_version: int = 1,
) -> ExpensesView:
    """Cached wrapper around _fetch_expenses_view."""
    _ = schema_version
    return _fetch_expenses_view(start_date, end_date)


def _fetch_accounts_view() -> AccountsView:
    """Fetch bank and cash accounts with the net worth."""
    return ManageAccountsUseCase(build_accounts_repository()).get_view()


@st.cache_data(show_spinner=False)
def _load_accounts_view() -> AccountsView:
    """Cached wrapper around _fetch_accounts_view."""
    return _fetch_accounts_view()


def _fetch_debts_view() -> DebtsView:
    """Fetch debts with their total."""
    return ManageDebtsUseCase(build_debts_repository()).get_view()


@st.cache_data(show_spinner=False)
def _load_debts_view() -> DebtsView:
    """Cached wrapper around _fetch_debts_view."""
    return _fetch_debts_view()


def _run_action(action: Callable[[], object], success_message: str) -> bool:
    """Run a write action and report the outcome to the user.

    Cached reads are cleared only after the action succeeds, so a failed
    write keeps the previously displayed figures.

    Returns:
        bool: True when the action succeeded.
    """
    try:
        action()
    except InvalidTimeRangeError as exc:
        st.error(f"Check the clock times: {exc}")
        return False
    except ValidationError as exc:
        st.error(str(exc))
        return False
    except GatewayError as exc:
        st.error(f"Could not save your changes. Please try again. ({exc})")
        return False
    st.cache_data.clear()
    st.success(success_message)
    return True


def _selected_month(today: date) -> tuple[date, date]:
    """Render month navigation in the sidebar and return its window."""
    month = st.session_state.get("selected_month") or today.replace(day=1)
    previous_col, next_col = st.sidebar.columns(2)
    if previous_col.button("Previous month", key="month_prev"):
        month = shift_month(month, -1)
    if next_col.button("Next month", key="month_next"):
        month = shift_month(month, 1)
    st.session_state["selected_month"] = month
    st.sidebar.caption(f"Showing {month:%B %Y}")
    return month_window(month)


def _render_category_chart(
    breakdown: ExpenseBreakdown,
    currency_symbol: str,
    title: str,
    chart_size: int = 300,
    palette: Sequence[str] | None = None,
) -> None:
    """Render a donut chart of spending by category.

    Args:
        breakdown: Spending totals by category.
        currency_symbol: Symbol used in the tooltips.
        title: Chart title to display above the donut.
        chart_size: Width/height for the chart canvas.
        palette: Optional color palette override.
    """
    if not breakdown.totals:
        st.info("No expenses recorded for this period.")
        return
    data = prepare_category_chart_data(breakdown, currency_symbol)

    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
        stroke="#0f1115",
        strokeWidth=2,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=list(palette or DEFAULT_PALETTE)),
            legend=alt.Legend(
                orient="bottom",
                title=None,
                direction="horizontal",
                columns=2,
            ),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.25)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(
        text="amount_label:N"
    )
    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(
        stroke=None
    )
    st.subheader(title)
    st.altair_chart(chart, use_container_width=True)


def _render_income_vs_expenses(earnings: Decimal, expenses: Decimal) -> None:
    """Render a two-bar comparison of income and spending."""
    chart = alt.Chart(
        alt.Data(values=income_vs_expenses_data(earnings, expenses))
    ).mark_bar(cornerRadiusTopLeft=6, cornerRadiusTopRight=6).encode(
        x=alt.X("kind:N", title=None),
        y=alt.Y("amount:Q", title=None),
        color=alt.Color(
            "kind:N",
            scale=alt.Scale(range=["#2e7d32", "#e76f51"]),
            legend=None,
        ),
    )
    st.subheader("Income vs Expenses")
    st.altair_chart(chart, use_container_width=True)


def _render_dashboard(currency_symbol: str, today: date) -> None:
    view = _load_dashboard(today)
    summary = view.summary
    if view.display_name:
        st.caption(f"Welcome back, {view.display_name}")

    balance_col, earnings_col, expenses_col, savings_col = st.columns(4)
    balance_col.metric(
        "Net Worth",
        format_money(summary.total_balance, currency_symbol),
    )
    earnings_col.metric(
        "Earnings this month",
        format_money(summary.monthly_earnings, currency_symbol),
    )
    expenses_col.metric(
        "Expenses this month",
        format_money(summary.monthly_expenses, currency_symbol),
    )
    savings_col.metric(
        "Net Savings",
        format_money(summary.net_savings, currency_symbol),
        f"{summary.savings_rate}% saved",
    )
    st.caption(
        f"{format_hours(view.earnings.total_hours)} worked, "
        f"{format_money(view.earnings.unpaid_earnings, currency_symbol)} "
        f"pending payment"
    )

    left, right = st.columns(2)
    with left:
        st.subheader("Recent Expenses")
        if view.recent_expenses:
            st.dataframe(
                expense_rows(view.recent_expenses, currency_symbol),
                use_container_width=True,
                hide_index=True,
            )
        else:
            st.info("No expenses recorded yet.")
    with right:
        _render_category_chart(
            view.breakdown,
            currency_symbol,
            "Spending by Category",
        )


def _entry_label(entry: WorkEntry) -> str:
    return (
        f"{entry.work_date:%Y-%m-%d} {entry.job_name} "
        f"({format_hours(entry.hours_worked)})"
    )


def _work_entry_inputs(prefix: str, entry: WorkEntry | None = None) -> dict:
    """Render the timesheet inputs and return the raw values.

    In time-based mode the computed hours are shown read-only.
    """
    job_name = st.text_input(
        "Job name",
        value=entry.job_name if entry else "",
        key=f"{prefix}_job",
    )
    work_date = st.date_input(
        "Date",
        value=entry.work_date if entry else date.today(),
        key=f"{prefix}_date",
    )
    hourly_rate = st.number_input(
        "Hourly rate",
        min_value=0.0,
        value=float(entry.hourly_rate) if entry else 0.0,
        step=0.5,
        key=f"{prefix}_rate",
    )
    time_based = st.checkbox(
        "Use clock in / clock out",
        value=entry.is_time_based if entry else False,
        key=f"{prefix}_time_based",
    )
    values = {
        "job_name": job_name,
        "work_date": work_date,
        "hourly_rate": str(hourly_rate),
    }
    if time_based:
        in_col, out_col = st.columns(2)
        time_in = in_col.time_input(
            "Time in",
            value=entry.time_in if entry and entry.time_in else time(9, 0),
            key=f"{prefix}_time_in",
        )
        time_out = out_col.time_input(
            "Time out",
            value=entry.time_out if entry and entry.time_out else time(17, 0),
            key=f"{prefix}_time_out",
        )
        try:
            hours = compute_hours(time_in, time_out)
            st.caption(f"Hours: {format_hours(hours)}")
        except InvalidTimeRangeError as exc:
            st.warning(str(exc))
        values.update(time_in=time_in, time_out=time_out)
    else:
        values["hours_worked"] = str(
            st.number_input(
                "Hours worked",
                min_value=0.0,
                value=float(entry.hours_worked) if entry else 0.0,
                step=0.5,
                key=f"{prefix}_hours",
            )
        )
    return values


def _render_timesheets(currency_symbol: str, today: date) -> None:
    start_date, end_date = _selected_month(today)
    view = _load_timesheet_view(start_date, end_date)
    summary = view.summary

    total_col, paid_col, unpaid_col = st.columns(3)
    total_col.metric(
        "Total",
        format_money(summary.total_earnings, currency_symbol),
        format_hours(summary.total_hours),
        delta_color="off",
    )
    paid_col.metric(
        "Paid",
        format_money(summary.paid_earnings, currency_symbol),
        format_hours(summary.paid_hours),
        delta_color="off",
    )
    unpaid_col.metric(
        "Pending",
        format_money(summary.unpaid_earnings, currency_symbol),
        format_hours(summary.unpaid_hours),
        delta_color="off",
    )

    st.subheader("Days")
    st.dataframe(
        day_summary_rows(view.days, currency_symbol),
        use_container_width=True,
        hide_index=True,
    )

    job_filter = st.selectbox("Job", [ALL_JOBS, *view.job_names])
    entries = (
        view.entries
        if job_filter == ALL_JOBS
        else [entry for entry in view.entries if entry.job_name == job_filter]
    )
    st.dataframe(
        work_entry_rows(entries, currency_symbol),
        use_container_width=True,
        hide_index=True,
    )

    toggle = TogglePaidStatusUseCase(build_timesheets_repository())
    unpaid_days = [day.work_date for day in view.days if not day.all_paid]
    if unpaid_days:
        day_col, button_col = st.columns([3, 1])
        paid_day = day_col.selectbox("Day to mark paid", unpaid_days)
        if button_col.button("Mark day paid"):
            _run_action(
                lambda: toggle.execute_for_day(
                    paid_day,
                    True,
                    start_date,
                    end_date,
                ),
                f"Marked {paid_day} paid",
            )

    labels = option_labels(view.entries, "entry_id", _entry_label)
    selected = st.multiselect(
        "Entries",
        list(labels),
        format_func=labels.get,
    )
    paid_button, unpaid_button = st.columns(2)
    if paid_button.button("Mark selected paid"):
        _run_action(
            lambda: toggle.execute(selected, True, start_date, end_date),
            f"Marked {len(selected)} entries paid",
        )
    if unpaid_button.button("Mark selected unpaid"):
        _run_action(
            lambda: toggle.execute(selected, False, start_date, end_date),
            f"Marked {len(selected)} entries unpaid",
        )

    with st.expander("Log work"):
        values = _work_entry_inputs("new_entry")
        if st.button("Save entry"):
            _run_action(
                lambda: SaveWorkEntryUseCase(
                    build_timesheets_repository()
                ).execute(WorkEntryForm(**values)),
                "Work entry saved",
            )

    if labels:
        with st.expander("Edit or delete an entry"):
            entry_id = st.selectbox(
                "Entry",
                list(labels),
                format_func=labels.get,
                key="edit_entry_id",
            )
            entry = next(e for e in view.entries if e.entry_id == entry_id)
            values = _work_entry_inputs(f"edit_{entry_id}", entry)
            save_col, delete_col = st.columns(2)
            if save_col.button("Update entry"):
                _run_action(
                    lambda: SaveWorkEntryUseCase(
                        build_timesheets_repository()
                    ).execute(WorkEntryForm(entry_id=entry_id, **values)),
                    "Work entry updated",
                )
            if delete_col.button("Delete entry"):
                _run_action(
                    lambda: DeleteWorkEntryUseCase(
                        build_timesheets_repository()
                    ).execute(entry_id),
                    "Work entry deleted",
                )


def _expense_inputs(prefix: str, expense=None) -> dict:
    """Render the expense inputs and return the raw values."""
    categories = list(ExpenseCategory)
    methods = list(PaymentMethod)
    name = st.text_input(
        "Name",
        value=expense.name if expense else "",
        key=f"{prefix}_name",
    )
    amount = st.number_input(
        "Amount",
        min_value=0.0,
        value=float(expense.amount) if expense else 0.0,
        step=1.0,
        key=f"{prefix}_amount",
    )
    category = st.selectbox(
        "Category",
        categories,
        index=categories.index(
            expense.category if expense else ExpenseCategory.OTHER
        ),
        format_func=lambda item: item.label,
        key=f"{prefix}_category",
    )
    payment_method = st.selectbox(
        "Payment method",
        methods,
        index=methods.index(
            expense.payment_method if expense else PaymentMethod.DEBIT
        ),
        format_func=lambda item: item.label,
        key=f"{prefix}_method",
    )
    notes = st.text_input(
        "Notes",
        value=(expense.notes or "") if expense else "",
        key=f"{prefix}_notes",
    )
    return {
        "name": name,
        "amount": str(amount),
        "category": category,
        "payment_method": payment_method,
        "notes": notes,
    }


def _render_expenses(currency_symbol: str, today: date) -> None:
    start_date, end_date = _selected_month(today)
    view = _load_expenses_view(start_date, end_date)

    st.metric(
        "Spent this month",
        format_money(view.breakdown.grand_total, currency_symbol),
    )

    with st.expander("Add expense"):
        values = _expense_inputs("new_expense")
        if st.button("Save expense"):
            _run_action(
                lambda: SaveExpenseUseCase(
                    build_expenses_repository()
                ).execute(ExpenseForm(spent_at=datetime.now(), **values)),
                "Expense saved",
            )

    if not view.day_groups:
        st.info("No expenses recorded for this month.")
        return
    for group in view.day_groups:
        st.markdown(
            f"**{group.day:%A, %B %d}** "
            f"· {format_money(group.total, currency_symbol)}"
        )
        st.dataframe(
            expense_rows(group.expenses, currency_symbol),
            use_container_width=True,
            hide_index=True,
        )

    labels = option_labels(
        view.expenses,
        "expense_id",
        lambda item: f"{item.spent_at:%Y-%m-%d} {item.name}",
    )
    if labels:
        with st.expander("Edit or delete an expense"):
            expense_id = st.selectbox(
                "Expense",
                list(labels),
                format_func=labels.get,
                key="edit_expense_id",
            )
            expense = next(
                item for item in view.expenses if item.expense_id == expense_id
            )
            values = _expense_inputs(f"edit_{expense_id}", expense)
            save_col, delete_col = st.columns(2)
            if save_col.button("Update expense"):
                _run_action(
                    lambda: SaveExpenseUseCase(
                        build_expenses_repository()
                    ).execute(ExpenseForm(expense_id=expense_id, **values)),
                    "Expense updated",
                )
            if delete_col.button("Delete expense"):
                _run_action(
                    lambda: DeleteExpenseUseCase(
                        build_expenses_repository()
                    ).execute(expense_id),
                    "Expense deleted",
                )


def _render_accounts(currency_symbol: str) -> None:
    view = _load_accounts_view()
    use_case = ManageAccountsUseCase(build_accounts_repository())
    cash_balance = (
        view.cash_account.current_balance
        if view.cash_account is not None
        else Decimal("0")
    )

    worth_col, cash_col = st.columns(2)
    worth_col.metric(
        "Net Worth",
        format_money(view.net_worth, currency_symbol),
    )
    cash_col.metric("Cash", format_money(cash_balance, currency_symbol))

    st.dataframe(
        bank_account_rows(view.bank_accounts, currency_symbol),
        use_container_width=True,
        hide_index=True,
    )

    with st.expander("Add bank account"):
        bank_name = st.text_input("Bank name", key="new_bank_name")
        account_type = st.selectbox(
            "Account type",
            list(AccountType),
            format_func=lambda item: item.label,
            key="new_bank_type",
        )
        balance = st.number_input("Balance", value=0.0, key="new_bank_balance")
        if st.button("Save account"):
            _run_action(
                lambda: use_case.add_bank_account(
                    bank_name,
                    account_type,
                    str(balance),
                ),
                "Account added",
            )

    labels = option_labels(
        view.bank_accounts,
        "account_id",
        lambda item: f"{item.bank_name} ({item.account_type.label})",
    )
    if labels:
        with st.expander("Update or delete an account"):
            account_id = st.selectbox(
                "Account",
                list(labels),
                format_func=labels.get,
            )
            new_balance = st.number_input(
                "New balance",
                value=0.0,
                key="edit_bank_balance",
            )
            save_col, delete_col = st.columns(2)
            if save_col.button("Update balance"):
                _run_action(
                    lambda: use_case.update_bank_balance(
                        account_id,
                        str(new_balance),
                    ),
                    "Balance updated",
                )
            if delete_col.button("Delete account"):
                _run_action(
                    lambda: use_case.delete_bank_account(account_id),
                    "Account deleted",
                )

    with st.expander("Cash on hand"):
        cash = st.number_input(
            "Cash balance",
            value=float(cash_balance),
            key="cash_balance",
        )
        if st.button("Save cash"):
            _run_action(
                lambda: use_case.set_cash_balance(str(cash)),
                "Cash balance saved",
            )


def _render_debts(currency_symbol: str) -> None:
    view = _load_debts_view()
    use_case = ManageDebtsUseCase(build_debts_repository())

    st.metric("Total Debt", format_money(view.total_debt, currency_symbol))
    st.dataframe(
        debt_rows(view.debts, currency_symbol),
        use_container_width=True,
        hide_index=True,
    )

    with st.expander("Add debt"):
        debt_name = st.text_input("Debt name", key="new_debt_name")
        debt_type = st.selectbox(
            "Debt type",
            list(DebtType),
            format_func=lambda item: item.label,
            key="new_debt_type",
        )
        amount = st.number_input(
            "Amount owed",
            min_value=0.0,
            value=0.0,
            key="new_debt_amount",
        )
        if st.button("Save debt"):
            _run_action(
                lambda: use_case.add_debt(debt_name, debt_type, str(amount)),
                "Debt added",
            )

    labels = option_labels(view.debts, "debt_id", lambda item: item.debt_name)
    if labels:
        with st.expander("Payment or new borrowing"):
            debt_id = st.selectbox(
                "Debt",
                list(labels),
                format_func=labels.get,
            )
            change = st.number_input(
                "Change (negative for a payment)",
                value=0.0,
                key="debt_change",
            )
            save_col, delete_col = st.columns(2)
            if save_col.button("Apply change"):
                _run_action(
                    lambda: use_case.adjust_debt(debt_id, str(change)),
                    "Debt updated",
                )
            if delete_col.button("Delete debt"):
                _run_action(
                    lambda: use_case.delete_debt(debt_id),
                    "Debt deleted",
                )


def _render_stats(currency_symbol: str, today: date) -> None:
    start_date, _ = _selected_month(today)
    view = _load_dashboard(start_date)
    summary = view.summary

    income_col, spent_col, saved_col = st.columns(3)
    income_col.metric(
        "Income",
        format_money(summary.monthly_earnings, currency_symbol),
    )
    spent_col.metric(
        "Expenses",
        format_money(summary.monthly_expenses, currency_symbol),
    )
    saved_col.metric(
        "Savings rate",
        f"{summary.savings_rate}%",
        format_money(summary.net_savings, currency_symbol),
    )

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_category_chart(
            view.breakdown,
            currency_symbol,
            "Spending by Category",
        )
    with chart_right:
        _render_income_vs_expenses(
            summary.monthly_earnings,
            summary.monthly_expenses,
        )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Paytrack", layout="wide")
    st.title("Paytrack")

    page = st.sidebar.selectbox("Page", PAGES)
    get_usage_logger().info(f"Page view: {page}")
    currency_symbol = FinanceSettings.from_env().currency_symbol
    today = date.today()

    try:
        if page == "Dashboard":
            _render_dashboard(currency_symbol, today)
        elif page == "Timesheets":
            _render_timesheets(currency_symbol, today)
        elif page == "Expenses":
            _render_expenses(currency_symbol, today)
        elif page == "Accounts":
            _render_accounts(currency_symbol)
        elif page == "Debts":
            _render_debts(currency_symbol)
        else:
            _render_stats(currency_symbol, today)
    except GatewayError as exc:
        st.error(f"Could not load your data. Please try again. ({exc})")
    except RuntimeError as exc:
        st.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
