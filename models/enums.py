from enum import Enum

class NewsletterStatus(Enum):
    DRAFT = 'draft'
    PUBLISHED = 'published'

class NewsletterTemplate(Enum):
    DEFAULT = 'default'
    EVENT_RECAP = 'event-recap'
    WORKSHOP = 'workshop'
    ANNOUNCEMENT = 'announcement'
