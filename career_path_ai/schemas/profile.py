"""Structured resume profile: extracted by the AI service, edited on the Refine step."""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

Proficiency = Literal["Basic", "Intermediate", "Advanced", "Native"]


class _CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire (AI schema field names)."""

    model_config = ConfigDict(populate_by_name=True)


class WorkExperience(_CamelModel):
    """One position held, in display order."""

    company: str = Field(default="", description="Employer name")
    role: str = Field(default="", description="Job title held")
    duration: str = Field(default="", description="Date range as written on the resume")
    description: str = Field(default="", description="Responsibilities and achievements")


class Education(_CamelModel):
    institution: str = Field(default="", description="School or university")
    degree: str = Field(default="", description="Degree or programme")
    year: str = Field(default="", description="Graduation year or range")


class Language(_CamelModel):
    language: str = Field(default="", description="Language name")
    proficiency: Proficiency = Field(default="Intermediate", description="Basic, Intermediate, Advanced or Native")


class Project(_CamelModel):
    name: str = Field(default="", description="Project name")
    description: str = Field(default="", description="What was built or achieved")
    link: str = Field(default="", description="Optional project URL")


class UserLinks(_CamelModel):
    """Profile and portfolio links; absent links are empty strings."""

    linkedin: str = Field(default="", description="LinkedIn profile URL")
    portfolio: str = Field(default="", description="Portfolio URL")
    github: str = Field(default="", description="GitHub profile URL")
    other: str = Field(default="", description="Any other link")


class UserProfile(_CamelModel):
    """Extracted and user-edited resume data. List order is display order."""

    full_name: str = Field(default="", alias="fullName", description="Candidate full name")
    email: str = Field(default="", description="Contact email")
    phone: str = Field(default="", description="Contact phone")
    summary: str = Field(default="", description="Free-text professional summary")
    skills: List[str] = Field(default_factory=list, description="Skills in resume order")
    experience: List[WorkExperience] = Field(default_factory=list, description="Work history")
    education: List[Education] = Field(default_factory=list, description="Education history")
    certifications: List[str] = Field(default_factory=list, description="Certification names")
    languages: List[Language] = Field(default_factory=list, description="Spoken languages")
    projects: List[Project] = Field(default_factory=list, description="Notable projects")
    links: UserLinks = Field(default_factory=UserLinks, description="Profile links")

    def to_wire(self) -> dict:
        """Dump with the camelCase field names used by the AI schemas."""
        return self.model_dump(by_alias=True)


def create_empty_profile() -> UserProfile:
    """Canonical zero-value profile: empty strings, empty lists, empty links."""
    return UserProfile()
