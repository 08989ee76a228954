"""FAQ pairs answered by the keyword responder."""

from typing import Tuple

from models.knowledge import FAQEntry

SAMPLE_FAQS: Tuple[FAQEntry, ...] = (
    FAQEntry(
        question="What are the admission requirements for undergraduate programs?",
        answer=(
            "For undergraduate programs, you need: High school diploma or equivalent, "
            "minimum GPA of 3.0, SAT scores (1200+ recommended), two letters of "
            "recommendation, and a personal statement. Some programs may have "
            "additional requirements."
        ),
        category="Eligibility",
    ),
    FAQEntry(
        question="What is the application deadline?",
        answer=(
            "Early Decision: November 15th, Regular Decision: February 1st, Late "
            "Applications: March 15th (limited availability). International students "
            "should apply by January 15th for best consideration."
        ),
        category="Deadlines",
    ),
    FAQEntry(
        question="What are the tuition fees for the academic year?",
        answer=(
            "Undergraduate tuition: $45,000/year, Graduate tuition: $52,000/year. "
            "Additional costs include housing ($12,000), meal plans ($4,500), and "
            "books/supplies ($1,200). Financial aid is available."
        ),
        category="Fees",
    ),
    FAQEntry(
        question="What programs does the university offer?",
        answer=(
            "We offer 150+ undergraduate programs and 80+ graduate programs across 12 "
            "schools including Engineering, Business, Liberal Arts, Medicine, Law, "
            "Computer Science, and more."
        ),
        category="Programs",
    ),
    FAQEntry(
        question="How do I apply for financial aid?",
        answer=(
            "Complete the FAFSA by March 1st. Submit CSS Profile for institutional aid. "
            "Merit scholarships are automatically considered with admission application. "
            "Work-study programs available."
        ),
        category="Financial Aid",
    ),
)
