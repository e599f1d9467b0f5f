from blindaudit.db.session import SessionLocal
from blindaudit.models.prompt import Prompt

RELATIONSHIP_PROMPTS = [
    "What does a typical weekday evening look like for you, and how do you envision spending evenings together as a couple?",
    "How do you handle disagreements or conflicts? Describe a recent conflict and how you resolved it.",
    "What are your expectations around finances? How should we handle joint expenses, savings, and individual spending?",
    "How important is family to you? What role do you see extended family playing in our lives?",
    "What are your thoughts on having children? If you want children, how many and when?",
    "How do you express love and feel most loved? What makes you feel appreciated in a relationship?",
    "What are your career goals for the next 5-10 years? How do you see our careers fitting together?",
    "How do you handle stress? What do you need from a partner during difficult times?",
    "What role does faith or spirituality play in your life? How should we approach religious practices as a couple?",
    "What are your expectations around household responsibilities? How should we divide chores and tasks?",
    "How do you feel about maintaining friendships outside the relationship? What boundaries are important to you?",
    "What does quality time together look like for you? How much alone time do you need?",
    "How do you approach health and wellness? What lifestyle habits are important to you?",
    "What are your views on intimacy and physical affection in a relationship?",
    "Where do you see us living? Are you open to relocating for career or family reasons?",
]

def main():
    db = SessionLocal()
    try:
        # prompts are immutable once seeded; only fill in missing order slots
        existing = {p.order for p in db.query(Prompt).all()}
        to_add = [
            Prompt(text=text, order=order)
            for order, text in enumerate(RELATIONSHIP_PROMPTS, start=1)
            if order not in existing
        ]
        if to_add:
            db.add_all(to_add)
            db.commit()
        print(f"Prompts seeded: {len(to_add)} new, {len(existing)} existing")
    finally:
        db.close()

if __name__ == "__main__":
    main()
