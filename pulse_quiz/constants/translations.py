"""User-facing strings in English and Uzbek."""

from __future__ import annotations

from enum import Enum


class Language(Enum):
    EN = "en"
    UZ = "uz"

    def toggled(self) -> Language:
        return Language.UZ if self is Language.EN else Language.EN

    @property
    def toggle_label(self) -> str:
        # Label of the button that switches away from this language.
        return "UZB" if self is Language.EN else "ENG"


TRANSLATIONS: dict[Language, dict[str, str]] = {
    Language.EN: {
        "create": "Create",
        "home": "Home",
        "refresh": "Refresh",
        "ready_to_pulse": "Ready to Pulse?",
        "hero_subtitle": "Pick a quiz and race the clock.",
        "no_quizzes": "No quizzes found. Be the first to create a quiz!",
        "loading": "Loading...",
        "play_now": "Play Now",
        "delete": "Delete",
        "export": "Export",
        "confirm_delete": "Delete the quiz \"{title}\"?",
        "create_a_quiz": "Create a Quiz",
        "quiz_details": "Quiz Details",
        "title": "Title",
        "description": "Description",
        "topic": "Topic",
        "questions": "Questions",
        "question": "Question",
        "type_question": "Type your question here...",
        "option": "Option",
        "correct": "Correct!",
        "correct_option": "Correct option",
        "time_limit": "Time limit",
        "add_question": "Add Question",
        "remove_question": "Remove",
        "import_file": "Import from file",
        "save_quiz": "Save Quiz",
        "quiz_saved": "Quiz saved.",
        "import_failed": "Import failed",
        "imported_questions": "Imported {count} questions from {path}.",
        "export_failed": "Export failed",
        "quiz_exported": "Quiz exported to {path}.",
        "start_game": "Start Game",
        "question_count": "{count} questions",
        "question_progress": "Question {number} of {count}",
        "time": "Time",
        "score": "Score",
        "incorrect": "Incorrect",
        "time_up": "Time's up!",
        "correct_answer_was": "The correct answer was: {answer}",
        "points_awarded": "+ {points} points",
        "next_question": "Next Question",
        "show_results": "Show Results",
        "completed_quiz": "You completed the quiz!",
        "final_score": "Final Score",
        "podium_finish": "Podium finish!",
        "play_again": "Play Again",
        "empty_quiz": "This quiz has no questions yet.",
        "about": "About",
        "help": "Help",
        "settings": "Settings",
        "font_sizes": "Font Sizes",
        "ui_font_size": "Interface font size:",
        "game_font_size": "Game font size (questions, answers):",
        "cancel": "Cancel",
        "apply": "Apply",
        "server_error": "Server error",
    },
    Language.UZ: {
        "create": "Yaratish",
        "home": "Bosh sahifa",
        "refresh": "Yangilash",
        "ready_to_pulse": "Tayyormisiz?",
        "hero_subtitle": "Viktorinani tanlang va vaqt bilan poyga qiling.",
        "no_quizzes": "Viktorinalar topilmadi. Birinchi bo'lib yarating!",
        "loading": "Yuklanmoqda...",
        "play_now": "O'ynash",
        "delete": "O'chirish",
        "export": "Eksport",
        "confirm_delete": "\"{title}\" viktorinasini o'chirasizmi?",
        "create_a_quiz": "Viktorina yaratish",
        "quiz_details": "Viktorina tafsilotlari",
        "title": "Sarlavha",
        "description": "Tavsif",
        "topic": "Mavzu",
        "questions": "Savollar",
        "question": "Savol",
        "type_question": "Savolingizni shu yerga yozing...",
        "option": "Variant",
        "correct": "To'g'ri!",
        "correct_option": "To'g'ri variant",
        "time_limit": "Vaqt chegarasi",
        "add_question": "Savol qo'shish",
        "remove_question": "O'chirish",
        "import_file": "Fayldan import",
        "save_quiz": "Saqlash",
        "quiz_saved": "Viktorina saqlandi.",
        "import_failed": "Import amalga oshmadi",
        "imported_questions": "{path} faylidan {count} ta savol import qilindi.",
        "export_failed": "Eksport amalga oshmadi",
        "quiz_exported": "Viktorina {path} fayliga eksport qilindi.",
        "start_game": "O'yinni boshlash",
        "question_count": "{count} ta savol",
        "question_progress": "{count} tadan {number}-savol",
        "time": "Vaqt",
        "score": "Ball",
        "incorrect": "Noto'g'ri",
        "time_up": "Vaqt tugadi!",
        "correct_answer_was": "To'g'ri javob: {answer}",
        "points_awarded": "+ {points} ball",
        "next_question": "Keyingi savol",
        "show_results": "Natijalarni ko'rish",
        "completed_quiz": "Viktorinani yakunladingiz!",
        "final_score": "Yakuniy ball",
        "podium_finish": "Shohsupa!",
        "play_again": "Qayta o'ynash",
        "empty_quiz": "Bu viktorinada hali savollar yo'q.",
        "about": "Dastur haqida",
        "help": "Yordam",
        "settings": "Sozlamalar",
        "font_sizes": "Shrift o'lchamlari",
        "ui_font_size": "Interfeys shrifti:",
        "game_font_size": "O'yin shrifti (savollar, javoblar):",
        "cancel": "Bekor qilish",
        "apply": "Qo'llash",
        "server_error": "Server xatosi",
    },
}

TOPIC_LABELS: dict[Language, dict[str, str]] = {
    Language.EN: {
        "General": "General",
        "Science": "Science",
        "History": "History",
        "Geography": "Geography",
        "Math": "Math",
        "Sport": "Sport",
        "Technology": "Technology",
        "Art": "Art",
    },
    Language.UZ: {
        "General": "Umumiy",
        "Science": "Fan",
        "History": "Tarix",
        "Geography": "Geografiya",
        "Math": "Matematika",
        "Sport": "Sport",
        "Technology": "Texnologiya",
        "Art": "San'at",
    },
}


def translate(language: Language, key: str, **kwargs: object) -> str:
    """Look up a UI string, falling back to English and then to the key itself."""
    template = TRANSLATIONS[language].get(key) or TRANSLATIONS[Language.EN].get(key, key)
    return template.format(**kwargs) if kwargs else template


def topic_label(language: Language, topic: str) -> str:
    return TOPIC_LABELS[language].get(topic, topic)
