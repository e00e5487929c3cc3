# repair_portal/portal/streamlit_app.py
"""Tenant Repair Portal UI.

Run with ``streamlit run repair_portal/portal/streamlit_app.py``. All state
lives in the API; this page keeps per-session view objects only.
"""
from __future__ import annotations

import streamlit as st

from repair_portal.core.config import get_settings
from repair_portal.core.constants import ISSUE_TYPES, PRIORITIES, SPECIALIZATIONS
from repair_portal.portal.client import PortalClient
from repair_portal.portal.forms import FormState, RepairRequestForm
from repair_portal.portal.views import TicketDetailView, TicketListView, ViewState, WorkerListView

PAGES = ("Submit Request", "Tickets", "Workers")


def _client() -> PortalClient:
    if "client" not in st.session_state:
        st.session_state["client"] = PortalClient(get_settings().API_BASE_URL)
    return st.session_state["client"]


def _state(key: str, factory):
    if key not in st.session_state:
        st.session_state[key] = factory()
    return st.session_state[key]


def _choice(label: str, options: list[str], key: str, current: str) -> str:
    choices = ["", *options]
    return st.selectbox(
        label,
        choices,
        index=choices.index(current) if current in choices else 0,
        format_func=lambda v: v or "Select…",
        key=key,
    )


def _field_error(form, field: str) -> None:
    if field in form.errors:
        st.caption(f":red[{form.errors[field]}]")


# ---------------------------------------------------------------------------
# Submit Request
# ---------------------------------------------------------------------------
def render_request_form(client: PortalClient) -> None:
    form: RepairRequestForm = _state("request_form", RepairRequestForm)
    st.header("Submit a Repair Request")

    if form.state is FormState.SUCCESS:
        st.success("Repair request submitted successfully")
        st.code(form.ticket_id, language=None)
        if st.button("Submit another request"):
            form.reset()
            for key in ("issue_type", "priority"):
                st.session_state.pop(key, None)
            st.rerun()
        return

    if form.submit_error:
        st.error(form.submit_error)

    with st.form("repair_request"):
        name = st.text_input("Full Name", value=form.values["name"])
        _field_error(form, "name")
        address = st.text_input("Property Address", value=form.values["address"])
        _field_error(form, "address")
        issue_type = _choice("Issue Type", ISSUE_TYPES, "issue_type", form.values["issueType"])
        _field_error(form, "issueType")
        priority = _choice("Priority", PRIORITIES, "priority", form.values["priority"])
        _field_error(form, "priority")
        description = st.text_area("Description", value=form.values["description"])
        _field_error(form, "description")
        submitted = st.form_submit_button("Submit Request", disabled=form.is_submitting)

    if submitted:
        for field, value in (
            ("name", name),
            ("address", address),
            ("issueType", issue_type),
            ("priority", priority),
            ("description", description),
        ):
            form.update(field, value)
        with st.spinner("Submitting…"):
            form.submit(client)
        st.rerun()


# ---------------------------------------------------------------------------
# Tickets
# ---------------------------------------------------------------------------
def render_ticket_detail(client: PortalClient, ticket_id: str) -> None:
    view: TicketDetailView | None = st.session_state.get("detail_view")
    if view is None or view.ticket_id != ticket_id:
        view = TicketDetailView(ticket_id)
        st.session_state["detail_view"] = view
    # Fetch on every rerun; another session may have assigned it meanwhile
    view.load(client)
    if st.button("Refresh", key=f"refresh_{ticket_id}"):
        st.rerun()

    if view.state is ViewState.ERROR:
        st.error(view.error)
        return

    ticket = view.ticket
    st.subheader(f"{ticket['issueType']} Issue")
    st.caption(f"Submitted on {ticket['createdAt']}")
    col_status, col_priority = st.columns(2)
    col_status.metric("Status", ticket["status"])
    col_priority.metric("Priority", ticket["priority"])
    st.write(f"**Tenant:** {ticket['name']}")
    st.write(f"**Address:** {ticket['address']}")
    st.write(f"**Description:** {ticket['description']}")
    st.text(f"Ticket ID: {ticket['id']}")

    st.markdown("#### Assignment")
    worker = ticket.get("assignedWorker")
    if worker:
        st.info(f"{worker['name']} ({worker['specialization']})")
    else:
        st.write("Unassigned")

    if not view.workers:
        st.warning("No workers available. Add one on the Workers page.")
    else:
        labels = {w["id"]: f"{w['name']} ({w['specialization']})" for w in view.workers}
        worker_id = st.selectbox(
            "Assign worker",
            [""] + list(labels),
            format_func=lambda v: labels.get(v, "Select a worker…"),
            key=f"assign_{ticket_id}",
        )
        if st.button("Assign", disabled=not view.can_assign or not worker_id):
            view.assign(client, worker_id)
            st.rerun()

    if view.assign_message:
        st.write(view.assign_message)


def render_tickets(client: PortalClient) -> None:
    st.header("Tickets")
    view = TicketListView()
    view.load(client)

    if view.state is ViewState.ERROR:
        st.error(view.error)
        return
    if not view.tickets:
        st.info("No tickets yet.")
        return

    st.dataframe(
        [
            {
                "Tenant": t["name"],
                "Issue": t["issueType"],
                "Priority": t["priority"],
                "Status": t["status"],
                "Worker": (t["assignedWorker"] or {}).get("name", ""),
                "Submitted": t["createdAt"],
            }
            for t in view.tickets
        ],
        use_container_width=True,
    )
    labels = {t["id"]: f"{t['issueType']} - {t['name']} ({t['id'][:8]})" for t in view.tickets}
    selected = st.selectbox(
        "Open ticket", [""] + list(labels), format_func=lambda v: labels.get(v, "Select…")
    )
    if selected:
        render_ticket_detail(client, selected)


# ---------------------------------------------------------------------------
# Workers
# ---------------------------------------------------------------------------
def render_workers(client: PortalClient) -> None:
    st.header("Workers")
    view: WorkerListView = _state("worker_view", WorkerListView)
    if view.state is not ViewState.LOADED:
        view.load(client)
    if view.state is ViewState.ERROR:
        st.error(view.error)
        if st.button("Retry"):
            view.load(client)
            st.rerun()
        return

    form = view.form
    with st.form("add_worker"):
        name = st.text_input("Worker name", value=form.values["name"])
        _field_error(form, "name")
        spec = _choice("Specialization", SPECIALIZATIONS, "specialization", form.values["specialization"])
        _field_error(form, "specialization")
        submitted = st.form_submit_button("Add Worker", disabled=form.is_submitting)
    if form.submit_error:
        st.error(form.submit_error)

    if submitted:
        form.update("name", name)
        form.update("specialization", spec)
        if view.add_worker(client):
            st.session_state.pop("specialization", None)
        st.rerun()

    if not view.workers:
        st.info("No workers yet.")
    for worker in view.workers:
        col_name, col_spec, col_action = st.columns([3, 2, 1])
        col_name.write(worker["name"])
        col_spec.write(worker["specialization"])
        if col_action.button("Remove", key=f"delete_{worker['id']}"):
            view.delete_worker(client, worker["id"])
            st.rerun()


def main() -> None:
    st.set_page_config(page_title="Tenant Repair Portal", page_icon="🔧")
    client = _client()
    page = st.sidebar.radio("Navigate", PAGES)
    if page == "Submit Request":
        render_request_form(client)
    elif page == "Tickets":
        render_tickets(client)
    else:
        render_workers(client)


main()
