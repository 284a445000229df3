"""
Request Schemas for the Portfolio API

Each Pydantic model validates one JSON request body. Field aliases carry
the camelCase names used on the wire.
"""

import json
import re
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

EMAIL_PATTERN = re.compile(r'\S+@\S+\.\S+')

# Field-level messages for missing or empty values, keyed by wire name
REQUIRED_MESSAGES = {
    'name': 'Name is required',
    'email': 'Valid email is required',
    'message': 'Message is required',
    'heroTitle': 'Hero title is required',
    'heroSubtitle': 'Hero subtitle is required',
    'heroDescription': 'Hero description is required',
    'aboutText': 'About text is required',
    'skillsList': 'Skills list is required',
    'projectsList': 'Projects list is required',
}


def decode_json_list(value: Any, label: str) -> Any:
    """Decode a list field sent either as a JSON string or a native array"""
    if isinstance(value, str):
        if not value.strip():
            raise ValueError(f'{label} is required')
        try:
            value = json.loads(value)
        except json.JSONDecodeError as e:
            raise ValueError(f'{label} must be valid JSON: {e.msg}') from e
    if value is None:
        raise ValueError(f'{label} is required')
    if not isinstance(value, list):
        value = [value]
    return value


def coerce_text(value):
    """None -> '', numbers and booleans -> their string form"""
    if value is None:
        return ''
    if isinstance(value, (int, float, bool)):
        return str(value)
    return value


def split_technologies(value):
    """'React, Node.js' -> ['React', 'Node.js']"""
    if isinstance(value, str):
        return [t.strip() for t in value.split(',') if t.strip()]
    return value


def format_validation_errors(error: ValidationError):
    """Flatten pydantic errors into [{field, message}] for the JSON envelope"""
    errors = []
    for err in error.errors():
        field = '.'.join(str(part) for part in err.get('loc', ()))
        message = err.get('msg', 'Invalid value')
        if err.get('type') in ('missing', 'string_too_short') and field in REQUIRED_MESSAGES:
            message = REQUIRED_MESSAGES[field]
        elif message.startswith('Value error, '):
            message = message[len('Value error, '):]
        errors.append({'field': field, 'message': message})
    return errors


class ContactCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)

    @field_validator('email')
    @classmethod
    def check_email(cls, value):
        if not EMAIL_PATTERN.fullmatch(value):
            raise ValueError('Valid email is required')
        return value


class ProjectItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    # Items are stored as drafted; only the shape is normalised
    title: str = ''
    description: str = ''
    image: str = ''
    technologies: List[str] = Field(default_factory=list)
    github_url: str = Field('', alias='githubUrl')
    demo_url: str = Field('', alias='demoUrl')

    @field_validator('title', 'description', 'image', 'github_url', 'demo_url', mode='before')
    @classmethod
    def text_or_empty(cls, value):
        return coerce_text(value)

    @field_validator('technologies', mode='before')
    @classmethod
    def parse_technologies(cls, value):
        if value is None:
            return []
        value = split_technologies(value)
        if isinstance(value, list):
            return [coerce_text(t) for t in value]
        return value

    def to_document(self):
        return self.model_dump(by_alias=True)


class PortfolioContentUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    hero_title: str = Field(..., min_length=1, alias='heroTitle')
    hero_subtitle: str = Field(..., min_length=1, alias='heroSubtitle')
    hero_description: str = Field(..., min_length=1, alias='heroDescription')
    about_text: str = Field(..., min_length=1, alias='aboutText')
    skills: List[str] = Field(..., alias='skillsList')
    projects: List[ProjectItem] = Field(..., alias='projectsList')
    profile_image: Optional[str] = Field(None, alias='profileImage')
    version: Optional[int] = None

    @field_validator('skills', mode='before')
    @classmethod
    def parse_skills(cls, value):
        return [coerce_text(s) for s in decode_json_list(value, 'Skills list')]

    @field_validator('projects', mode='before')
    @classmethod
    def parse_projects(cls, value):
        return decode_json_list(value, 'Projects list')

    def to_fields(self):
        """Column values for the content row"""
        return {
            'hero_title': self.hero_title,
            'hero_subtitle': self.hero_subtitle,
            'hero_description': self.hero_description,
            'about_text': self.about_text,
            'skills': list(self.skills),
            'projects': [p.to_document() for p in self.projects],
            'profile_image': self.profile_image or None,
        }


__all__ = [
    'ContactCreate',
    'ProjectItem',
    'PortfolioContentUpdate',
    'ValidationError',
    'decode_json_list',
    'coerce_text',
    'split_technologies',
    'format_validation_errors',
]
