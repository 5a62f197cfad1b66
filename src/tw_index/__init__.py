"""Per-project Tailwind utility index builder."""

from .models import BuildOutcome, Built, Failed, ProjectContext
from .pipeline import IndexBuilder

__all__ = ["BuildOutcome", "Built", "Failed", "IndexBuilder", "ProjectContext"]
