"""Profile information and career timeline."""

import logging

from sqlalchemy.orm import Session

from portfolio.exceptions import NotFound
from portfolio.models.career import Education, Experience
from portfolio.models.profile import ProfileInformation
from portfolio.schemas.profile import ProfileUpdate
from portfolio.services.base import Upload, db_action
from portfolio.services.storage import StorageService

logger = logging.getLogger(__name__)


class ProfileService:
    """The single public profile. The newest row is the current one."""

    def __init__(self, db: Session, storage: StorageService | None = None):
        self.db = db
        self.storage = storage

    def _latest(self) -> ProfileInformation | None:
        with db_action(self.db, "fetch profile"):
            return (
                self.db.query(ProfileInformation).order_by(ProfileInformation.id.desc()).first()
            )

    def get_profile(self) -> ProfileInformation:
        profile = self._latest()
        if profile is None:
            raise NotFound("Profile information not found")
        return profile

    def update_profile(self, data: ProfileUpdate) -> dict:
        """Write the provided fields, creating the profile if none exists yet."""
        values = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
        if not values:
            return {"success": False, "message": "Nothing to update. No fields were provided."}

        profile = self._latest()
        with db_action(self.db, "update profile"):
            if profile is None:
                profile = ProfileInformation(name="")
                self.db.add(profile)
            for field, value in values.items():
                setattr(profile, field, value)
            self.db.commit()
            self.db.refresh(profile)

        fields = ", ".join(values)
        logger.info(f"Profile {profile.id} updated: {fields}")
        return {
            "success": True,
            "message": f"Profile updated successfully. {len(values)} field(s) updated: {fields}",
            "data": profile,
        }

    def update_image(self, upload: Upload) -> ProfileInformation:
        stored = self.storage.upload_image(
            upload.data, upload.filename, upload.content_type, "portfolio/profile"
        )
        profile = self._latest()
        previous = profile.image_url if profile else None
        with db_action(self.db, "update profile image"):
            if profile is None:
                profile = ProfileInformation(name="")
                self.db.add(profile)
            profile.image_url = stored.url
            self.db.commit()
            self.db.refresh(profile)
        self.storage.replace_quietly(previous)
        return profile

    def career_timeline(self) -> dict:
        """Education and experience merged into one list, most recent first."""
        with db_action(self.db, "fetch career timeline"):
            educations = self.db.query(Education).order_by(Education.graduation_date.desc()).all()
            experiences = self.db.query(Experience).order_by(Experience.starting_date.desc()).all()

        timeline = [
            {
                "id": edu.id,
                "type": "education",
                "title": edu.title,
                "organization": edu.institution,
                "location": edu.location,
                "start_date": None,
                "end_date": edu.graduation_date,
                "description": edu.description,
                "image_url": edu.image_url,
                "achievements": [],
                "technologies": [],
            }
            for edu in educations
        ]
        timeline += [
            {
                "id": exp.id,
                "type": "experience",
                "title": exp.title,
                "organization": exp.company,
                "location": exp.location,
                "start_date": exp.starting_date,
                "end_date": exp.ending_date,
                "description": exp.description,
                "image_url": exp.image_url,
                "achievements": exp.key_achievements or [],
                "technologies": exp.technologies or [],
            }
            for exp in experiences
        ]

        # Most recent of end or start date first; undated entries last
        dated = [e for e in timeline if _sort_date(e) is not None]
        undated = [e for e in timeline if _sort_date(e) is None]
        dated.sort(key=_sort_date, reverse=True)

        return {
            "timeline": dated + undated,
            "summary": {
                "total_education": len(educations),
                "total_experience": len(experiences),
                "total_items": len(educations) + len(experiences),
            },
        }


def _sort_date(entry: dict):
    return entry["end_date"] or entry["start_date"]
