import os

from flask import Flask, render_template, jsonify, request, send_from_directory


def create_app(session, report_dir=None):
    app = Flask(
        __name__,
        template_folder=os.path.join(os.path.dirname(__file__), "templates"),
        static_folder=os.path.join(os.path.dirname(__file__), "static"),
    )
    app.config["REPORT_DIR"] = report_dir

    def no_scan():
        return jsonify({"error": "no scan available"}), 404

    @app.route("/")
    def index():
        return render_template("dashboard.html")

    @app.route("/api/status")
    def api_status():
        result = session.last_result
        return jsonify({
            "scanned": result is not None,
            "file": result.filepath if result else None,
        })

    @app.route("/api/summary")
    def api_summary():
        if session.last_result is None:
            return no_scan()
        return jsonify(session.last_result.summary)

    @app.route("/api/series")
    def api_series():
        if session.last_result is None:
            return no_scan()
        data = session.last_result.to_dict()
        return jsonify({
            "file": data["file"],
            "block_size": data["block_size"],
            "precision": data["precision"],
            "samples": data["samples"],
        })

    @app.route("/api/edges")
    def api_edges():
        if session.last_result is None:
            return no_scan()
        return jsonify([edge.to_dict() for edge in session.last_result.edges])

    @app.route("/api/events")
    def api_all_events():
        since = request.args.get("since", type=float)
        if since is not None:
            return jsonify(session.event_store.get_events_since(since))
        return jsonify(session.event_store.get_all())

    @app.route("/api/events/recent")
    def api_recent_events():
        return jsonify(session.event_store.get_recent(200))

    @app.route("/api/reports")
    def api_reports():
        report_dir = app.config.get("REPORT_DIR")
        if not report_dir or not os.path.isdir(report_dir):
            return jsonify([])
        files = sorted(
            [f for f in os.listdir(report_dir) if f.endswith(".json")],
            reverse=True,
        )
        return jsonify(files)

    @app.route("/api/reports/<filename>")
    def api_report_detail(filename):
        report_dir = app.config.get("REPORT_DIR")
        if not filename.endswith(".json"):
            return jsonify({"error": "invalid filename"}), 400
        if not report_dir:
            return jsonify({"error": "reports disabled"}), 404
        return send_from_directory(report_dir, filename)

    return app
