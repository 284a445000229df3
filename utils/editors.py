"""
Editors Module - Working copy of the portfolio content for the admin panel

The draft holds the skills and projects as native lists and only encodes
them to JSON strings when the document is submitted. Nothing is persisted
until the caller saves the payload through the API.

An admin front end pairs a draft with PortfolioApiClient: load the draft
from get_portfolio_content(), edit it, then send to_payload() back.
"""

import copy
import json
from typing import Any, Dict, List, Optional

from schemas import split_technologies
from .helpers import load_image_input

TEXT_FIELDS = ('heroTitle', 'heroSubtitle', 'heroDescription', 'aboutText')
LIST_FIELDS = {'skillsList': 'Skills', 'projectsList': 'Projects'}
PROJECT_FIELDS = ('title', 'description', 'image', 'technologies', 'githubUrl', 'demoUrl')


class EditorError(ValueError):
    """User-facing rejection of an edit; the draft is left unchanged"""


def _parse_list(raw) -> List[Any]:
    if isinstance(raw, list):
        return list(raw)
    try:
        parsed = json.loads(raw or '[]')
    except (TypeError, ValueError):
        return []
    return parsed if isinstance(parsed, list) else []


class ContentDraft:
    """In-memory copy of the content document with dirty tracking"""

    def __init__(self, document: Optional[Dict[str, Any]] = None):
        self.fields: Dict[str, str] = {name: '' for name in TEXT_FIELDS}
        self.profile_image = ''
        self.version: Optional[int] = None
        self.skills: List[str] = []
        self.projects: List[Dict[str, Any]] = []
        self.dirty = False
        if document:
            self.load(document)

    def load(self, document):
        """Replace the working copy with a freshly fetched document"""
        for name in TEXT_FIELDS:
            self.fields[name] = document.get(name) or ''
        self.profile_image = document.get('profileImage') or ''
        self.version = document.get('version')
        self.skills = _parse_list(document.get('skillsList'))
        self.projects = _parse_list(document.get('projectsList'))
        self.dirty = False

    def set_field(self, name, value):
        if name not in TEXT_FIELDS:
            raise KeyError(name)
        self.fields[name] = value
        self.dirty = True

    def set_raw_list(self, field, text):
        """Replace skillsList/projectsList from hand-edited JSON text"""
        label = LIST_FIELDS.get(field)
        if label is None:
            raise KeyError(field)
        try:
            parsed = json.loads(text)
        except ValueError as e:
            raise EditorError(f"Invalid {label} JSON: {e}. Please check your JSON format.") from e
        if not isinstance(parsed, list):
            parsed = [parsed]
        if field == 'skillsList':
            self.skills = parsed
        else:
            self.projects = parsed
        self.dirty = True

    def set_profile_image(self, value):
        """URL string or uploaded file; rejected files leave the draft as is"""
        self.profile_image = load_image_input(value)
        self.dirty = True

    def remove_profile_image(self):
        self.profile_image = ''
        self.dirty = True

    def touch(self):
        self.dirty = True

    def to_payload(self, include_version=False):
        """Whole document for POST /api/admin/portfolio-content"""
        payload = dict(self.fields)
        payload['skillsList'] = json.dumps(self.skills)
        payload['projectsList'] = json.dumps(self.projects)
        payload['profileImage'] = self.profile_image
        if include_version and self.version is not None:
            payload['version'] = self.version
        return payload

    def mark_saved(self, document=None):
        if document:
            self.load(document)
        self.dirty = False


class SkillsEditor:
    """Ordered list of unique skill names"""

    def __init__(self, draft: ContentDraft):
        self.draft = draft

    @property
    def skills(self):
        return list(self.draft.skills)

    def _commit(self, skills):
        self.draft.skills = skills
        self.draft.touch()

    def _check_index(self, index):
        if not 0 <= index < len(self.draft.skills):
            raise EditorError(f"No skill at position {index}")

    def add(self, name):
        name = (name or '').strip()
        if not name:
            raise EditorError("Skill name is required")
        if name in self.draft.skills:
            raise EditorError("This skill already exists")
        self._commit(self.draft.skills + [name])
        return name

    def remove(self, index):
        self._check_index(index)
        skills = list(self.draft.skills)
        removed = skills.pop(index)
        self._commit(skills)
        return removed

    def move(self, from_index, to_index):
        self._check_index(from_index)
        self._check_index(to_index)
        skills = list(self.draft.skills)
        skills.insert(to_index, skills.pop(from_index))
        self._commit(skills)

    def move_up(self, index):
        if index > 0:
            self.move(index, index - 1)

    def move_down(self, index):
        if index < len(self.draft.skills) - 1:
            self.move(index, index + 1)


class ProjectsEditor:
    """Project records; technologies are edited as comma-separated text"""

    def __init__(self, draft: ContentDraft):
        self.draft = draft

    @property
    def projects(self):
        return copy.deepcopy(self.draft.projects)

    def _commit(self, projects):
        self.draft.projects = projects
        self.draft.touch()

    def _check_index(self, index):
        if not 0 <= index < len(self.draft.projects):
            raise EditorError(f"No project at position {index}")

    @staticmethod
    def _normalize(project):
        if not (project.get('title') or '').strip() or not (project.get('description') or '').strip():
            raise EditorError("Please fill in at least the title and description")
        record = {name: project.get(name) or '' for name in PROJECT_FIELDS}
        record['technologies'] = split_technologies(project.get('technologies') or [])
        image = project.get('image')
        record['image'] = load_image_input(image) if image else ''
        return record

    def technologies_text(self, index):
        self._check_index(index)
        techs = self.draft.projects[index].get('technologies') or []
        return ', '.join(techs) if isinstance(techs, list) else str(techs)

    def add(self, project):
        record = self._normalize(project)
        self._commit(self.draft.projects + [record])
        return record

    def edit(self, index, project):
        self._check_index(index)
        record = self._normalize(project)
        projects = list(self.draft.projects)
        projects[index] = record
        self._commit(projects)
        return record

    def remove(self, index):
        self._check_index(index)
        projects = list(self.draft.projects)
        removed = projects.pop(index)
        self._commit(projects)
        return removed
