from .contexts import ExportArtifact, ExportContext
from .exporters import export_excel, export_json, record_to_row

__all__ = ["ExportArtifact", "ExportContext", "export_json", "export_excel", "record_to_row"]
