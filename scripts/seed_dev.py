# seed_dev.py
from datetime import date

from sqlalchemy.orm import Session

from peer_review.core import periods
from peer_review.db.session import SessionLocal
from peer_review.models.group import Group
from peer_review.models.review_period import ReviewPeriod
from peer_review.models.review_question import ReviewQuestion
from peer_review.models.student import Student


QUESTIONS = [
    (1, "How would you rate this peer's contribution to group discussions and collaborative work?"),
    (2, "How would you rate this peer's reliability and commitment to meeting deadlines?"),
]

# group name -> [(student name, email)]
ROSTER = {
    "Alpha Team": [
        ("James Smith", "james.smith@school.edu"),
        ("Sarah Johnson", "sarah.johnson@school.edu"),
        ("Michael Williams", "michael.williams@school.edu"),
        ("Emily Brown", "emily.brown@school.edu"),
        ("David Jones", "david.jones@school.edu"),
    ],
    "Beta Squad": [
        ("Matthew Hernandez", "matthew.hernandez@school.edu"),
        ("Melissa Lopez", "melissa.lopez@school.edu"),
        ("Joshua Gonzalez", "joshua.gonzalez@school.edu"),
        ("Nicole Wilson", "nicole.wilson@school.edu"),
        ("Andrew Anderson", "andrew.anderson@school.edu"),
    ],
    "Gamma Force": [
        ("Brandon Lee", "brandon.lee@school.edu"),
        ("Samantha White", "samantha.white@school.edu"),
        ("Justin Harris", "justin.harris@school.edu"),
        ("Victoria Clark", "victoria.clark@school.edu"),
        ("Tyler Lewis", "tyler.lewis@school.edu"),
    ],
}

MATRIC_PREFIX = "SC6/2510"


# ---------- helpers ----------

def get_or_create_question(db: Session, number: int, text: str) -> ReviewQuestion:
    q = db.query(ReviewQuestion).filter(ReviewQuestion.question_number == number).one_or_none()
    if q:
        if q.question_text != text:
            q.question_text = text
            db.commit()
        return q
    q = ReviewQuestion(question_number=number, question_text=text, max_score=5)
    db.add(q)
    db.commit()
    db.refresh(q)
    return q


def get_or_create_group(db: Session, name: str) -> Group:
    g = db.query(Group).filter(Group.name == name).one_or_none()
    if g:
        return g
    g = Group(name=name)
    db.add(g)
    db.commit()
    db.refresh(g)
    return g


def get_or_create_student(db: Session, matric: str, name: str, email: str, group: Group) -> Student:
    s = db.query(Student).filter(Student.matric_number == matric).one_or_none()
    if s:
        changed = False
        if s.name != name:
            s.name = name
            changed = True
        if s.group_id != group.id:
            s.group_id = group.id
            changed = True
        if changed:
            db.commit()
            db.refresh(s)
        return s
    s = Student(name=name, email=email, matric_number=matric, group_id=group.id)
    db.add(s)
    db.commit()
    db.refresh(s)
    return s


def ensure_current_period_active(db: Session, today: date) -> ReviewPeriod:
    period = periods.find_period(db, today.month, today.year)
    if period is None:
        period = periods.create_period(db, month=today.month, year=today.year)
        db.commit()
    period = periods.activate_period(db, period.id)
    db.commit()
    return period


def main():
    db = SessionLocal()
    try:
        for number, text in QUESTIONS:
            get_or_create_question(db, number, text)

        seq = 1
        for group_name, members in ROSTER.items():
            group = get_or_create_group(db, group_name)
            for name, email in members:
                get_or_create_student(db, f"{MATRIC_PREFIX}/{seq:03d}", name, email, group)
                seq += 1

        period = ensure_current_period_active(db, date.today())

        print("Questions:", db.query(ReviewQuestion).count())
        print("Groups:", db.query(Group).count())
        print("Students:", db.query(Student).count())
        print("Active period:", period.period_name)
        print(f"Sample matric numbers: {MATRIC_PREFIX}/001 to {MATRIC_PREFIX}/{seq - 1:03d}")
    finally:
        db.close()

if __name__ == "__main__":
    main()
