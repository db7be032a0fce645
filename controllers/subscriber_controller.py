from flask import current_app
from sqlalchemy.exc import IntegrityError

from common.database import db
from common.response import success_response, error_response
from models.subscriber import Subscriber

ALREADY_SUBSCRIBED = 'You are already subscribed to our newsletter!'

class SubscriberController:
    @staticmethod
    def subscribe(email):
        """Store a new subscriber; an existing email is rejected, never merged."""
        try:
            if Subscriber.get_by_email(email):
                return error_response(ALREADY_SUBSCRIBED, 409, alreadySubscribed=True)

            subscriber = Subscriber(email=email)
            subscriber.save()

            return success_response(
                'Successfully subscribed to the newsletter!',
                {'email': subscriber.email, 'subscribedAt': subscriber.serialize()['subscribedAt']},
                201,
            )
        except IntegrityError:
            db.session.rollback()
            return error_response(ALREADY_SUBSCRIBED, 409, alreadySubscribed=True)
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(f"Subscription error: {str(e)}")
            return error_response('Failed to subscribe. Please try again later.', 500)

    @staticmethod
    def count_active():
        try:
            return success_response(count=Subscriber.active_query().count())
        except Exception as e:
            current_app.logger.error(f"Error fetching subscriber count: {str(e)}")
            return error_response('Failed to fetch subscriber count', 500)

    @staticmethod
    def list_active():
        try:
            subscribers = Subscriber.active_query() \
                .order_by(Subscriber.subscribed_at.desc(), Subscriber.id.desc()).all()
            return success_response(
                data=[s.serialize() for s in subscribers],
                count=len(subscribers),
            )
        except Exception as e:
            current_app.logger.error(f"Error fetching subscribers: {str(e)}")
            return error_response('Failed to fetch subscribers', 500)

    @staticmethod
    def delete(subscriber_id):
        try:
            subscriber = Subscriber.get_by_id(subscriber_id)
            if not subscriber:
                return error_response('Subscriber not found', 404)
            subscriber.delete()
            return success_response('Subscriber removed successfully')
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(f"Error deleting subscriber {subscriber_id}: {str(e)}")
            return error_response('Failed to delete subscriber', 500)
