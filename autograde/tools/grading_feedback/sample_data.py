"""Sample students, assignment and submissions for demos and manual testing."""

from datetime import datetime, timedelta

from .data_manager import GradingDataManager
from .models import Assignment, Student, Submission


def load_sample_data(manager: GradingDataManager) -> GradingDataManager:
    """Seed ``manager`` with three students, one assignment and two submissions."""
    alice = Student(name="Alice Johnson", email="alice@example.com")
    bob = Student(name="Bob Smith", email="bob@example.com")
    carol = Student(name="Carol Davis", email="carol@example.com")
    for student in (alice, bob, carol):
        manager.add_student(student)

    assignment = Assignment(
        title="Algorithm Analysis",
        description="Explain the time complexity of quicksort algorithm",
        max_score=100.0,
        due_date=datetime.now() + timedelta(days=7),
    )
    manager.add_assignment(assignment)

    manager.add_submission(Submission(
        student_id=alice.id,
        assignment_id=assignment.id,
        content=(
            "Quicksort is a divide-and-conquer algorithm. It has an average time "
            "complexity of O(n log n) and worst-case complexity of O(n²). The "
            "algorithm works by selecting a pivot element and partitioning the "
            "array around it."
        ),
    ))
    manager.add_submission(Submission(
        student_id=bob.id,
        assignment_id=assignment.id,
        content="Quicksort is fast. It sorts things quickly using recursion and pivot elements.",
    ))
    return manager
