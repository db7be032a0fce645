from flask import current_app
from sqlalchemy.exc import IntegrityError

from common.database import db
from common.response import success_response, error_response
from models.newsletter import Newsletter

NEWSLETTER_FIELDS = ('title', 'slug', 'excerpt', 'content_markdown', 'template',
                     'status', 'cover_image', 'gallery')

def _slug_exists_response(slug):
    return error_response(f'Slug "{slug}" already exists', 400)

class NewsletterController:
    @staticmethod
    def list_published(page=1, limit=10, template=None):
        """Published newsletters, newest published first, one page at a time."""
        try:
            query = Newsletter.published_query()
            if template is not None:
                query = query.filter(Newsletter.template == template)

            total = query.count()
            newsletters = query.offset((page - 1) * limit).limit(limit).all()

            return success_response(
                data=[n.serialize() for n in newsletters],
                count=len(newsletters),
                pagination={
                    'total': total,
                    'page': page,
                    'limit': limit,
                    'pages': (total + limit - 1) // limit,
                },
            )
        except Exception as e:
            current_app.logger.error(f"Error fetching newsletters: {str(e)}")
            return error_response('Error fetching newsletters', 500)

    @staticmethod
    def get_published_by_slug(slug):
        try:
            newsletter = Newsletter.get_by_slug(slug.strip().lower())
            # drafts are invisible to the public
            if not newsletter or not newsletter.is_published:
                return error_response('Newsletter not found', 404)
            return success_response(data=newsletter.serialize())
        except Exception as e:
            current_app.logger.error(f"Error fetching newsletter {slug}: {str(e)}")
            return error_response('Error fetching newsletter', 500)

    @staticmethod
    def list_all():
        """Every newsletter for the admin dashboard, newest created first."""
        try:
            newsletters = Newsletter.admin_query().all()
            return success_response(
                data=[n.serialize() for n in newsletters],
                count=len(newsletters),
            )
        except Exception as e:
            current_app.logger.error(f"Error fetching newsletters for admin: {str(e)}")
            return error_response('Error fetching newsletters', 500)

    @staticmethod
    def get_by_id(newsletter_id):
        try:
            newsletter = Newsletter.get_by_id(newsletter_id)
            if not newsletter:
                return error_response('Newsletter not found', 404)
            return success_response(data=newsletter.serialize())
        except Exception as e:
            current_app.logger.error(f"Error fetching newsletter {newsletter_id}: {str(e)}")
            return error_response('Error fetching newsletter', 500)

    @staticmethod
    def create(data):
        """Create a newsletter from validated data."""
        try:
            if Newsletter.slug_taken(data['slug']):
                return _slug_exists_response(data['slug'])

            newsletter = Newsletter(**{field: data[field] for field in NEWSLETTER_FIELDS if field in data})
            newsletter.save()

            current_app.logger.info(f"Newsletter created: {newsletter.slug} ({newsletter.status.value})")
            return success_response('Newsletter created successfully', newsletter.serialize(), 201)
        except IntegrityError:
            # unique index caught a concurrent insert with the same slug
            db.session.rollback()
            return _slug_exists_response(data['slug'])
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(f"Error creating newsletter: {str(e)}")
            return error_response('Error creating newsletter', 500)

    @staticmethod
    def update(newsletter_id, data):
        """
        Replace the fields present in ``data``.

        Moving to published stamps published_at the first time only; moving
        back to draft keeps it.
        """
        try:
            newsletter = Newsletter.get_by_id(newsletter_id)
            if not newsletter:
                return error_response('Newsletter not found', 404)

            if 'slug' in data and Newsletter.slug_taken(data['slug'], exclude_id=newsletter.id):
                return _slug_exists_response(data['slug'])

            for field in NEWSLETTER_FIELDS:
                if field in data:
                    setattr(newsletter, field, data[field])
            db.session.commit()

            current_app.logger.info(f"Newsletter updated: {newsletter.slug} ({newsletter.status.value})")
            return success_response('Newsletter updated successfully', newsletter.serialize())
        except IntegrityError:
            db.session.rollback()
            return _slug_exists_response(data.get('slug'))
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(f"Error updating newsletter {newsletter_id}: {str(e)}")
            return error_response('Error updating newsletter', 500)

    @staticmethod
    def delete(newsletter_id):
        try:
            newsletter = Newsletter.get_by_id(newsletter_id)
            if not newsletter:
                return error_response('Newsletter not found', 404)

            data = newsletter.serialize()
            newsletter.delete()

            current_app.logger.info(f"Newsletter deleted: {data['slug']}")
            return success_response('Newsletter deleted successfully', data)
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(f"Error deleting newsletter {newsletter_id}: {str(e)}")
            return error_response('Error deleting newsletter', 500)
