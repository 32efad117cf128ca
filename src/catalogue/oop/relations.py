"""Object relations: dependency, association, aggregation and composition.

Notes:
- `Professor.teach` depends on a `Course` only for the duration of the call.
- A professor is associated with one student.
- A department aggregates professors it does not own.
- A university creates and owns its departments.
"""

from __future__ import annotations

from typing import Protocol


class Learner(Protocol):
    def remember(self, knowledge: str) -> None: ...


class Course:
    def get_knowledge(self) -> str:
        return "Knowledge from the course"


class Student:
    def __init__(self) -> None:
        self.knowledge: list[str] = []

    def remember(self, knowledge: str) -> None:
        self.knowledge.append(knowledge)
        print(f"Student remembered: {knowledge}")


class Professor:
    def __init__(self) -> None:
        self.student: Learner | None = None

    def set_student(self, student: Learner) -> None:
        self.student = student

    def teach(self, course: Course) -> None:
        if self.student is None:
            raise ValueError("Professor has no student to teach")
        self.student.remember(course.get_knowledge())


class Department:
    def __init__(self, professors: list[Professor]) -> None:
        self.professors = professors

    def print_professors(self) -> None:
        print(f"Professors in the department: {len(self.professors)}")


class University:
    def __init__(self) -> None:
        self.departments = [Department([])]

    def print_departments(self) -> None:
        print(f"Departments in the university: {len(self.departments)}")


def main() -> None:
    professor = Professor()
    professor.set_student(Student())
    professor.teach(Course())

    Department([professor]).print_professors()
    University().print_departments()


if __name__ == "__main__":
    main()
