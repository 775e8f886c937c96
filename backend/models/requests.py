from pydantic import BaseModel, Field


class CoverageRequest(BaseModel):
    resume_keywords: list[str | None] = Field(default=[], description="Keywords extracted from the resume")
    job_skills: list[str | None] = Field(default=[], description="Skills listed on the job posting")


class JobSkills(BaseModel):
    id: str
    title: str = ""
    skills: list[str | None] = []


class RankJobsRequest(BaseModel):
    resume_keywords: list[str | None] = Field(default=[], description="Keywords extracted from the resume")
    jobs: list[JobSkills] = Field(default=[], max_length=500)
