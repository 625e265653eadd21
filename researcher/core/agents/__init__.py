"""LLM writer for dossier sections."""

from researcher.core.agents.dossier_writer import DossierWriter

__all__ = ["DossierWriter"]
