"""
Static admissions knowledge catalog.

The catalog is seeded once at import time and never changes afterwards, so a
single KnowledgeStore can be shared by any number of concurrent queries.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Tuple

from models.knowledge import Category, KnowledgeEntry
from utils.error_handling import ValidationError


class KnowledgeStore:
    """Read-only, insertion-ordered collection of knowledge entries."""

    def __init__(self, entries: Iterable[KnowledgeEntry]) -> None:
        self._entries: Tuple[KnowledgeEntry, ...] = tuple(entries)
        seen = set()
        for entry in self._entries:
            if entry.id in seen:
                raise ValidationError(f"Duplicate knowledge entry id: {entry.id}")
            seen.add(entry.id)

    def entries(self) -> Tuple[KnowledgeEntry, ...]:
        """Return every entry in seed order."""
        return self._entries

    def by_category(self, category: Category) -> Tuple[KnowledgeEntry, ...]:
        return tuple(entry for entry in self._entries if entry.category == category)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)


UNDERGRADUATE_REQUIREMENTS = KnowledgeEntry(
    id="1",
    title="Undergraduate Admission Requirements",
    content="""Complete admission requirements for undergraduate programs:

**Academic Requirements:**
- High school diploma or equivalent
- Minimum cumulative GPA of 3.0 (4.0 scale)
- Core curriculum completion (4 years English, 3 years Math, 3 years Science, 2 years Social Studies)

**Standardized Tests:**
- SAT: Minimum 1200 (recommended 1350+)
- ACT: Minimum 26 (recommended 30+)
- International students: TOEFL 80+ or IELTS 6.5+

**Application Materials:**
- Completed application form
- Official transcripts
- Two letters of recommendation (one academic, one personal)
- Personal statement (500-750 words)
- Resume/Activity list
- Application fee: $75

**Additional Requirements (Program-Specific):**
- Engineering: Advanced Math and Science courses
- Business: Economics or Statistics preferred
- Arts: Portfolio submission required
- Pre-Med: Biology, Chemistry, Physics, and Math courses""",
    category=Category.REQUIREMENTS,
    tags=("undergraduate", "admission", "GPA", "SAT", "ACT", "requirements"),
    last_updated=date(2024, 1, 15),
)

GRADUATE_REQUIREMENTS = KnowledgeEntry(
    id="2",
    title="Graduate Admission Requirements",
    content="""Graduate program admission requirements:

**General Requirements:**
- Bachelor's degree from accredited institution
- Minimum undergraduate GPA of 3.2
- GRE/GMAT scores (varies by program)
- Statement of Purpose
- Three academic/professional references
- Resume/CV

**Program-Specific Requirements:**
- MBA: 2+ years work experience, GMAT 550+
- Engineering: Relevant undergraduate degree, GRE required
- Computer Science: Programming background, technical portfolio
- Education: Teaching license (for some programs)
- Law: LSAT required, bachelor's degree in any field
- Medicine: MCAT, prerequisite courses, clinical experience

**International Students:**
- TOEFL 100+ or IELTS 7.0+
- Credential evaluation required
- Financial documentation
- Visa support provided upon admission""",
    category=Category.REQUIREMENTS,
    tags=("graduate", "admission", "GRE", "GMAT", "international"),
    last_updated=date(2024, 1, 15),
)

APPLICATION_DEADLINES = KnowledgeEntry(
    id="3",
    title="Application Deadlines 2024-2025",
    content="""Important dates for the 2024-2025 academic year:

**Undergraduate Deadlines:**
- Early Decision I: November 15, 2024
- Early Decision II: January 15, 2025
- Regular Decision: February 1, 2025
- Transfer Applications: March 15, 2025
- Late Applications: May 1, 2025 (space permitting)

**Graduate Deadlines:**
- Fall Semester: February 1, 2025
- Spring Semester: October 15, 2024
- Summer Semester: March 1, 2025

**International Student Deadlines:**
- Fall Semester: January 15, 2025
- Spring Semester: September 15, 2024

**Financial Aid Deadlines:**
- FAFSA: March 1, 2025
- CSS Profile: February 15, 2025
- Scholarship Applications: January 31, 2025

**Important Reminders:**
- Submit all materials by 11:59 PM EST on deadline date
- Late applications accepted based on space availability
- Priority given to complete applications submitted by deadline""",
    category=Category.DEADLINES,
    tags=("deadlines", "application", "FAFSA", "international", "transfer"),
    last_updated=date(2024, 1, 10),
)

TUITION_AND_FEES = KnowledgeEntry(
    id="4",
    title="Tuition and Fees Structure",
    content="""Comprehensive cost breakdown for 2024-2025:

**Undergraduate Costs (per year):**
- Tuition: $45,000
- Technology Fee: $500
- Student Activity Fee: $300
- Health Services Fee: $400
- Total Academic Costs: $46,200

**Room and Board:**
- Standard Double Room: $8,500
- Premium Single Room: $12,000
- Meal Plan (19 meals/week): $4,500
- Meal Plan (14 meals/week): $3,800

**Graduate Costs (per year):**
- Master's Programs: $52,000
- Doctoral Programs: $55,000
- MBA Program: $65,000
- Law School: $58,000
- Medical School: $62,000

**Additional Expenses:**
- Books and Supplies: $1,200
- Personal Expenses: $2,000
- Transportation: $1,500
- Total Estimated Cost: $55,000-60,000

**Payment Options:**
- Full payment discount: 2%
- Monthly payment plan available
- Merit scholarships: $5,000-$25,000
- Need-based aid: Up to full tuition""",
    category=Category.FEES,
    tags=("tuition", "fees", "costs", "scholarships", "financial aid"),
    last_updated=date(2024, 1, 12),
)

ACADEMIC_PROGRAMS = KnowledgeEntry(
    id="5",
    title="Academic Programs and Schools",
    content="""Comprehensive list of academic offerings:

**School of Engineering:**
- Computer Science (BS, MS, PhD)
- Electrical Engineering (BS, MS, PhD)
- Mechanical Engineering (BS, MS, PhD)
- Civil Engineering (BS, MS, PhD)
- Biomedical Engineering (BS, MS, PhD)
- Environmental Engineering (BS, MS)
- Data Science (BS, MS)

**School of Business:**
- Business Administration (BBA, MBA, Executive MBA)
- Accounting (BS, MS)
- Finance (BS, MS)
- Marketing (BS, MS)
- International Business (BS, MS)
- Entrepreneurship (BS, Certificate)

**School of Liberal Arts:**
- English Literature (BA, MA, PhD)
- History (BA, MA, PhD)
- Psychology (BA, MA, PhD)
- Sociology (BA, MA)
- Philosophy (BA, MA)
- Foreign Languages (BA, MA)

**School of Sciences:**
- Biology (BS, MS, PhD)
- Chemistry (BS, MS, PhD)
- Physics (BS, MS, PhD)
- Mathematics (BS, MS, PhD)
- Environmental Science (BS, MS)

**Professional Schools:**
- School of Medicine (MD, PhD)
- School of Law (JD, LLM)
- School of Education (MEd, EdD)
- School of Nursing (BSN, MSN, DNP)""",
    category=Category.PROGRAMS,
    tags=("programs", "majors", "degrees", "schools", "undergraduate", "graduate"),
    last_updated=date(2024, 1, 8),
)

CAMPUS_LIFE = KnowledgeEntry(
    id="6",
    title="Campus Life and Support Services",
    content="""Comprehensive support and campus life information:

**Student Support Services:**
- Academic Advising Center
- Career Services and Job Placement
- Counseling and Psychological Services
- Disability Support Services
- International Student Services
- Financial Aid Office
- Student Health Center
- Tutoring and Learning Center

**Campus Facilities:**
- 15 Residence Halls (4,500 bed capacity)
- 3 Dining Centers + 12 Cafés
- State-of-the-art Library System
- Recreation and Fitness Centers
- Student Union Building
- Performing Arts Center
- Research Laboratories
- Innovation and Entrepreneurship Hub

**Student Organizations:**
- 200+ Student Clubs and Organizations
- 25 Greek Life Organizations
- Student Government Association
- Honor Societies and Academic Clubs
- Cultural and International Organizations
- Sports and Recreation Clubs
- Volunteer and Service Organizations

**Campus Safety:**
- 24/7 Campus Security
- Emergency Alert System
- Safe Walk Program
- Well-lit Campus Pathways
- Security Cameras Throughout Campus

**Technology Resources:**
- Campus-wide WiFi
- Computer Labs and Study Spaces
- Online Learning Management System
- Digital Library Resources
- Tech Support Services""",
    category=Category.CAMPUS,
    tags=("campus life", "support services", "facilities", "organizations"),
    last_updated=date(2024, 1, 5),
)

KNOWLEDGE_BASE: Tuple[KnowledgeEntry, ...] = (
    UNDERGRADUATE_REQUIREMENTS,
    GRADUATE_REQUIREMENTS,
    APPLICATION_DEADLINES,
    TUITION_AND_FEES,
    ACADEMIC_PROGRAMS,
    CAMPUS_LIFE,
)


def default_store() -> KnowledgeStore:
    """Store over the built-in admissions catalog."""
    return KnowledgeStore(KNOWLEDGE_BASE)
