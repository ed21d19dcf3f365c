MAX_TAGS = 5
MAX_TAG_LENGTH = 20


class TagError(ValueError):
    def __init__(self, title, message):
        super().__init__(message)
        self.title = title
        self.message = message


def normalize_tag(raw):
    return (raw or '').strip().lower()


def add_tag(tags, raw):
    """Return a new tag list with `raw` appended, or raise TagError"""
    tag = normalize_tag(raw)
    if not tag:
        raise TagError('Empty Tag', 'Tag cannot be empty')
    if tag in tags:
        raise TagError('Duplicate Tag', 'This tag has already been added.')
    if len(tags) >= MAX_TAGS:
        raise TagError('Tag Limit Reached', f'You can add a maximum of {MAX_TAGS} tags.')
    if len(tag) > MAX_TAG_LENGTH:
        raise TagError('Tag Too Long', f'Tags cannot exceed {MAX_TAG_LENGTH} characters.')
    return [*tags, tag]
