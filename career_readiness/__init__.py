"""Career readiness engine: skill extraction, readiness scoring and gap analysis."""

__version__ = "0.1.0"
