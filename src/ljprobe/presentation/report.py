import logging
import os

from ..core.domain.models.potential_result import PotentialResult

logger = logging.getLogger(__name__)


class ReportWriter:
    """Writes the per-residue breakdown of a potential calculation."""

    def write_csv(self, result: PotentialResult, output_path: str) -> str:
        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        df = result.to_frame()
        df.to_csv(output_path, index=False)
        logger.info(f"Wrote per-residue report ({len(df)} rows) to {output_path}")
        return output_path

    @staticmethod
    def format_summary(result: PotentialResult) -> str:
        lines = [f"Structure: {result.source}"]
        counts = result.category_counts()
        totals = result.category_totals()
        for category, count in counts.items():
            lines.append(
                f"  {category.name:<12} {count:>5} residues  {totals[category]:.6g} kcal/mol"
            )
        lines.append(f"Total LJ potential: {result.total:.6g} kcal/mol")
        return "\n".join(lines)
