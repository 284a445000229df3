"""
Helpers Module - Utility functions for common operations
"""

import base64
import csv
import io
import os
from datetime import datetime, timedelta, timezone

MAX_IMAGE_SIZE = 5 * 1024 * 1024  # 5MB
ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg'}
RECENT_WINDOW = timedelta(days=7)


class ImageInputError(ValueError):
    """User-facing rejection of an uploaded image"""


def allowed_file(filename):
    """Check if file extension is allowed"""
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def validate_image_upload(data, content_type, max_size=MAX_IMAGE_SIZE):
    """Reject oversized or non-image uploads"""
    if len(data) > max_size:
        raise ImageInputError(
            f"File too large. Please choose an image smaller than {max_size // (1024 * 1024)}MB")
    if not content_type or not content_type.lower().startswith('image/'):
        raise ImageInputError("Invalid file type. Please choose an image file (PNG, JPG, etc.)")


def image_to_data_uri(data, content_type):
    encoded = base64.b64encode(data).decode('ascii')
    return f"data:{content_type};base64,{encoded}"


def load_image_input(value, max_size=MAX_IMAGE_SIZE):
    """
    Turn an image input into the string stored on the content document

    Args:
        value: a URL string, or an uploaded file given as a dict with
            'data' (bytes) and 'content_type' ('filename' optional), or a
            file-like object with .read(), .content_type / .mimetype
        max_size (int): upload size cap in bytes

    Returns:
        str: the URL unchanged, or a data: URI for uploaded files

    Raises:
        ImageInputError: oversized or non-image file
    """
    if isinstance(value, str):
        return value.strip()

    if isinstance(value, dict):
        data = value.get('data') or b''
        content_type = value.get('content_type') or guess_image_type(value.get('filename'))
    else:
        data = value.read()
        content_type = (getattr(value, 'content_type', None) or getattr(value, 'mimetype', None)
                        or guess_image_type(getattr(value, 'filename', None)))

    validate_image_upload(data, content_type, max_size=max_size)
    return image_to_data_uri(data, content_type)


def parse_timestamp(value):
    """Accept datetimes or ISO strings; naive values are treated as UTC"""
    if isinstance(value, datetime):
        stamp = value
    elif value:
        text = str(value)
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        stamp = datetime.fromisoformat(text)
    else:
        stamp = datetime.min
    if stamp.tzinfo is None:
        stamp = stamp.replace(tzinfo=timezone.utc)
    return stamp


def filter_messages(messages, search='', recent_only=False, sort_order='newest', now=None):
    """
    Search, filter and sort contact messages for display

    Returns a new list; the input list and its items are left untouched.
    """
    result = list(messages or [])

    term = (search or '').lower()
    if term:
        result = [
            m for m in result
            if term in (m.get('name') or '').lower()
            or term in (m.get('email') or '').lower()
            or term in (m.get('message') or '').lower()
        ]

    if recent_only:
        cutoff = parse_timestamp(now or datetime.now(timezone.utc)) - RECENT_WINDOW
        result = [m for m in result if parse_timestamp(m.get('createdAt')) > cutoff]

    result.sort(key=lambda m: parse_timestamp(m.get('createdAt')), reverse=(sort_order != 'oldest'))
    return result


def export_messages_csv(messages):
    """CSV text with columns Name, Email, Message, Date"""
    buffer = io.StringIO()
    buffer.write('Name,Email,Message,Date\n')
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator='\n')
    for msg in messages or []:
        created = msg.get('createdAt')
        date = parse_timestamp(created).strftime('%Y-%m-%d %H:%M:%S') if created else ''
        writer.writerow([msg.get('name', ''), msg.get('email', ''), msg.get('message', ''), date])
    return buffer.getvalue()


def export_filename(today=None):
    today = today or datetime.now(timezone.utc).date()
    return f"contact-messages-{today.isoformat()}.csv"


def guess_image_type(filename):
    """Content type from the file extension, None if it is not an image"""
    if not filename or not allowed_file(filename):
        return None
    ext = os.path.splitext(filename)[1].lower().lstrip('.')
    if ext == 'jpg':
        ext = 'jpeg'
    if ext == 'svg':
        ext = 'svg+xml'
    return f"image/{ext}"
