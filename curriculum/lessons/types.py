"""
Type definitions for parsed lesson documents.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LessonFile:
    """One starter or solution file of a challenge."""

    name: str  # Output filename, e.g. "index.html"
    language: str  # Fence tag as written in the markdown
    content: str

    def to_dict(self) -> dict:
        return {"name": self.name, "language": self.language, "content": self.content}


@dataclass(frozen=True)
class LessonDocument:
    """A complete parsed lesson."""

    title: str
    description: str = ""
    files: tuple[LessonFile, ...] = ()
    test_code: str = ""
    solution_files: tuple[LessonFile, ...] | None = None  # None: format has no solutions

    def to_dict(self) -> dict:
        """Serialize with the camelCase keys used in course JSON."""
        data = {
            "title": self.title,
            "description": self.description,
            "files": [f.to_dict() for f in self.files],
        }
        if self.solution_files is not None:
            data["solutionFiles"] = [f.to_dict() for f in self.solution_files]
        data["testCode"] = self.test_code
        return data


@dataclass(frozen=True)
class NoLesson:
    """The document is not a valid challenge."""

    reason: str = ""

    def __bool__(self) -> bool:
        return False


ParseResult = LessonDocument | NoLesson


@dataclass
class Course:
    """Lessons grouped under one curriculum project directory."""

    slug: str
    title: str
    description: str
    language: str
    lessons: list[LessonDocument] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "language": self.language,
            "lessons": [lesson.to_dict() for lesson in self.lessons],
        }
