# catalog/controllers/catalog_controller.py

from flask import Blueprint, render_template

from catalog.services.catalog_service import CatalogService
from catalog.utils.decorators import uses_database

catalog_bp = Blueprint("catalog", __name__)


@catalog_bp.get("/")
@uses_database
def index():
    counts = CatalogService.summary_counts()
    return render_template("index.html", title="Local Library Home", **counts)
