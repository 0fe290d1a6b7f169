# app/routers/student_portfolio.py
"""
Student portfolio sub-resources.

Only student accounts may create or edit their own items; admins get the
usual mirror plus per-student listing and purge.
"""

from app.core.storage_utils import DOCUMENT_CONTENT_TYPES
from app.models.student import (
    StudentAchievement,
    StudentAward,
    StudentEducation,
    StudentExperience,
    StudentProject,
    StudentSkill,
)
from app.models.user import ROLE_STUDENT
from app.repositories.owned_repo import OwnedRepository
from app.routers.resource_router import build_owned_router
from app.schemas.student import (
    AchievementCreate,
    AchievementRead,
    AchievementUpdate,
    AwardCreate,
    AwardRead,
    AwardUpdate,
    EducationCreate,
    EducationRead,
    EducationUpdate,
    ExperienceCreate,
    ExperienceRead,
    ExperienceUpdate,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
    SkillCreate,
    SkillRead,
    SkillUpdate,
)
from app.services.resource_service import OwnedResourceService

skill_service = OwnedResourceService(
    OwnedRepository(StudentSkill, order_by=StudentSkill.level.desc()),
    label="Skill",
    owner_role=ROLE_STUDENT,
)
education_service = OwnedResourceService(
    OwnedRepository(StudentEducation, order_by=StudentEducation.start_date.desc()),
    label="Education",
    owner_role=ROLE_STUDENT,
)
experience_service = OwnedResourceService(
    OwnedRepository(StudentExperience, order_by=StudentExperience.start_date.desc()),
    label="Experience",
    owner_role=ROLE_STUDENT,
)
project_service = OwnedResourceService(
    OwnedRepository(StudentProject),
    label="Project",
    owner_role=ROLE_STUDENT,
    blob_fields={"image_url": "student-projects"},
)
achievement_service = OwnedResourceService(
    OwnedRepository(StudentAchievement),
    label="Achievement",
    owner_role=ROLE_STUDENT,
    blob_fields={"certificate_url": "student-achievements"},
    allowed_types=DOCUMENT_CONTENT_TYPES,
)
award_service = OwnedResourceService(
    OwnedRepository(StudentAward),
    label="Award",
    owner_role=ROLE_STUDENT,
    blob_fields={"image_url": "student-awards"},
)

skills_router = build_owned_router(
    prefix="/student-skills",
    tags=["Student Skills"],
    service=skill_service,
    read_model=SkillRead,
    update_model=SkillUpdate,
    create_model=SkillCreate,
    bulk_delete=True,
)

educations_router = build_owned_router(
    prefix="/student-educations",
    tags=["Student Educations"],
    service=education_service,
    read_model=EducationRead,
    update_model=EducationUpdate,
    create_model=EducationCreate,
    bulk_delete=True,
)

experiences_router = build_owned_router(
    prefix="/student-experiences",
    tags=["Student Experiences"],
    service=experience_service,
    read_model=ExperienceRead,
    update_model=ExperienceUpdate,
    create_model=ExperienceCreate,
    bulk_delete=True,
)

projects_router = build_owned_router(
    prefix="/student-projects",
    tags=["Student Projects"],
    service=project_service,
    read_model=ProjectRead,
    update_model=ProjectUpdate,
    create_model=ProjectCreate,
    image_field="image_url",
    bulk_delete=True,
)

# Certificate scan (image or PDF)
achievements_router = build_owned_router(
    prefix="/student-achievements",
    tags=["Student Achievements"],
    service=achievement_service,
    read_model=AchievementRead,
    update_model=AchievementUpdate,
    create_model=AchievementCreate,
    image_field="certificate_url",
    bulk_delete=True,
)

awards_router = build_owned_router(
    prefix="/student-awards",
    tags=["Student Awards"],
    service=award_service,
    read_model=AwardRead,
    update_model=AwardUpdate,
    create_model=AwardCreate,
    image_field="image_url",
    bulk_delete=True,
)

routers = [
    skills_router,
    educations_router,
    experiences_router,
    projects_router,
    achievements_router,
    awards_router,
]
