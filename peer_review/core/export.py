import csv
import io

from peer_review.core.aggregation import StudentResult

CSV_HEADERS = [
    "Student Name",
    "Matric Number",
    "Q1 Average",
    "Q2 Average",
    "Overall Average",
    "Number of Reviews",
]


def results_to_csv(results: list[StudentResult]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for r in results:
        writer.writerow([
            r.student_name,
            r.matric_number,
            f"{r.avg_q1:.2f}",
            f"{r.avg_q2:.2f}",
            f"{r.overall_avg:.2f}",
            str(r.review_count),
        ])
    return buf.getvalue()


def export_filename(group_name: str, period_name: str) -> str:
    raw = f"{group_name}_{period_name}_results.csv"
    # Header-safe: spaces become underscores, quotes and separators dropped
    return "".join(
        "_" if ch.isspace() else ch
        for ch in raw
        if ch.isalnum() or ch.isspace() or ch in "._-"
    )
