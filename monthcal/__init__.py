import logging

from flask import Flask, jsonify, request

from .calendar_grid import render_month_view, sort_events
from .config import CalendarConfig
from .controller import CalendarController
from .event_store import EventStore
from .flask_adapters import (
    event_to_dict,
    events_to_list,
    form_from_json,
    form_result_to_dict,
    month_view_to_dict,
)
from .notification import Notifier
from .storage import FileStorage

logger = logging.getLogger(__name__)


def create_controller(config: CalendarConfig | None = None) -> CalendarController:
    """Wire storage, notifier and store from config and hydrate the store."""
    config = config or CalendarConfig.from_env()
    notifier = Notifier(delay=config.notification_delay)
    store = EventStore(
        FileStorage(config.storage_path),
        storage_key=config.storage_key,
        notifier=notifier,
    ).open()
    return CalendarController(store, notifier=notifier)


def create_app(controller: CalendarController | None = None):
    app = Flask(__name__)
    controller = controller or create_controller()
    app.extensions["monthcal"] = controller

    @app.route("/api/months/current", methods=["GET"])
    def current_month():
        return jsonify(month_view_to_dict(controller.view()))

    @app.route("/api/months/<int:year>/<int:month>", methods=["GET"])
    def get_month(year, month):
        try:
            view = render_month_view(year, month, controller.store)
        except ValueError as e:
            return (str(e), 400)
        return jsonify(month_view_to_dict(view))

    @app.route("/api/navigate", methods=["POST"])
    def navigate():
        payload = request.get_json(silent=True) or {}
        try:
            delta = int(payload.get("delta", 0))
        except (TypeError, ValueError, OverflowError):
            return ("Invalid delta", 400)
        try:
            view = controller.navigate(delta)
        except ValueError as e:
            return (str(e), 400)
        return jsonify(month_view_to_dict(view))

    @app.route("/api/today", methods=["POST"])
    def today():
        return jsonify(month_view_to_dict(controller.go_to_today()))

    @app.route("/api/events", methods=["GET"])
    def list_events():
        date_str = request.args.get("date")
        if date_str:
            events = sort_events(controller.store.find_by_date(date_str))
        else:
            events = controller.store.all()
        return jsonify(events_to_list(events))

    @app.route("/api/events/<event_id>", methods=["GET"])
    def get_event(event_id):
        event = controller.store.get(event_id)
        if event is None:
            return ("Event not found", 404)
        return jsonify(event_to_dict(event))

    @app.route("/api/events", methods=["POST"])
    def create_event():
        form = form_from_json(request.get_json(silent=True))
        form.id = ""
        result = controller.submit(form)
        if not result.ok:
            return jsonify(form_result_to_dict(result)), 400
        return jsonify(form_result_to_dict(result)), 201

    @app.route("/api/events/<event_id>", methods=["PATCH"])
    def update_event(event_id):
        base = controller.edit_event_form(event_id)
        if base is None:
            return ("Event not found", 404)
        form = form_from_json(request.get_json(silent=True), base=base)
        form.id = event_id
        result = controller.submit(form)
        if not result.ok:
            return jsonify(form_result_to_dict(result)), 400
        return jsonify(form_result_to_dict(result))

    @app.route("/api/events/<event_id>", methods=["DELETE"])
    def delete_event(event_id):
        controller.delete(event_id)
        return ("", 204)

    @app.route("/api/notification", methods=["GET"])
    def notification():
        return jsonify({"message": controller.notifier.message})

    return app
