# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Flask WebUI for patchpanel port diagrams."""

from __future__ import annotations

import os

import yaml
from flask import Flask, Response, flash, redirect, render_template, request, url_for
from markupsafe import Markup
from pydantic import ValidationError
from yaml import YAMLError

from db import Database
from models import PanelDocument
from services.export import layout_json, ports_csv
from services.panel import build_panel, resolve_config
from services.render_svg import render_panel_html, render_panel_svg


def _document_from_request() -> tuple[PanelDocument, str]:
    """Read the uploaded YAML file, or fall back to the pasted form fields."""
    file = request.files.get("panel_yaml")
    if file and file.filename:
        raw = file.read().decode("utf-8")
        data = yaml.safe_load(raw)
        if not isinstance(data, dict):
            raise ValueError("panel YAML must be a mapping")
        return PanelDocument.model_validate(data), raw
    options = request.form.get("options", "")
    content = request.form.get("content", "")
    if not content.strip():
        raise ValueError("upload a panel YAML file or paste port lines")
    return PanelDocument(options=options, content=content), f"{options}\n{content}"


def create_app() -> Flask:
    app = Flask(__name__)
    app.secret_key = os.environ.get("SECRET_KEY", "dev-secret")
    app.config["MAX_CONTENT_LENGTH"] = 1024 * 1024

    db = Database(os.environ.get("PATCHPANEL_DB", "patchpanel.db"))
    db.init_db()

    @app.get("/")
    def index() -> Response:
        return redirect(url_for("upload"))

    @app.route("/upload", methods=["GET", "POST"])
    def upload() -> str | Response:
        if request.method == "POST":
            try:
                document, source_text = _document_from_request()
                config = resolve_config(document)
            except YAMLError as exc:
                flash(f"YAML parse error: {exc}")
                return redirect(url_for("upload"))
            except ValidationError as exc:
                flash(f"Validation error: {exc.error_count()} error(s): {exc.errors()[0]['msg']}")
                return redirect(url_for("upload"))
            except ValueError as exc:
                flash(f"Invalid panel: {exc}")
                return redirect(url_for("upload"))
            panel_id, revision_id = db.save_revision(config.name, source_text, document)
            app.logger.info("saved panel %s revision %s", panel_id, revision_id)
            return redirect(url_for("panel_detail", panel_id=panel_id, revision_id=revision_id))
        return render_template("upload.html", panels=db.list_panels())

    @app.get("/panels/<panel_id>")
    def panel_detail(panel_id: str) -> str | Response:
        revision_id = request.args.get("revision_id")
        revisions = db.list_revisions(panel_id)
        if not revisions:
            return Response("not found", status=404)
        chosen_id = revision_id or revisions[0]["revision_id"]
        document = db.get_document(chosen_id)
        if document is None:
            return Response("not found", status=404)
        result = build_panel(document)
        panel_html = render_panel_html(
            result.layout, ports_csv(result.records), result.errors, dom_id=chosen_id
        )
        return render_template(
            "panel.html",
            panel_id=panel_id,
            revisions=revisions,
            revision_id=chosen_id,
            result=result,
            panel_html=Markup(panel_html),
        )

    @app.get("/revisions/<revision_id>/panel.svg")
    def panel_svg(revision_id: str) -> Response:
        document = db.get_document(revision_id)
        if document is None:
            return Response("not found", status=404)
        result = build_panel(document)
        return Response(render_panel_svg(result.layout), mimetype="image/svg+xml")

    @app.get("/revisions/<revision_id>/export/ports.csv")
    def export_ports(revision_id: str) -> Response:
        document = db.get_document(revision_id)
        if document is None:
            return Response("not found", status=404)
        result = build_panel(document)
        return Response(
            ports_csv(result.records),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={revision_id}_ports.csv"},
        )

    @app.get("/revisions/<revision_id>/export/layout.json")
    def export_layout(revision_id: str) -> Response:
        document = db.get_document(revision_id)
        if document is None:
            return Response("not found", status=404)
        result = build_panel(document)
        return Response(layout_json(result.layout), mimetype="application/json")

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
