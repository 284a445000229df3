"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import admin_required
from .data import (
    create_user,
    get_user,
    get_user_by_username,
    create_contact,
    list_contacts,
    load_portfolio_content,
    save_portfolio_content,
    get_default_portfolio_data,
    build_public_view,
    ContentConflictError
)
from .security import (
    AuthContext,
    get_auth_context,
    get_client_ip,
    get_admin_credentials,
    verify_password,
    ensure_admin_user
)
from .helpers import (
    allowed_file,
    load_image_input,
    filter_messages,
    export_messages_csv,
    ImageInputError
)
from .editors import (
    ContentDraft,
    SkillsEditor,
    ProjectsEditor,
    EditorError
)
from .api_client import ApiError, PortfolioApiClient

__all__ = [
    # Decorators
    'admin_required',

    # Data
    'create_user',
    'get_user',
    'get_user_by_username',
    'create_contact',
    'list_contacts',
    'load_portfolio_content',
    'save_portfolio_content',
    'get_default_portfolio_data',
    'build_public_view',
    'ContentConflictError',

    # Security
    'AuthContext',
    'get_auth_context',
    'get_client_ip',
    'get_admin_credentials',
    'verify_password',
    'ensure_admin_user',

    # Helpers
    'allowed_file',
    'load_image_input',
    'filter_messages',
    'export_messages_csv',
    'ImageInputError',

    # Admin client
    'ContentDraft',
    'SkillsEditor',
    'ProjectsEditor',
    'EditorError',
    'ApiError',
    'PortfolioApiClient'
]
