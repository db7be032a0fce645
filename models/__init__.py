from .newsletter import Newsletter
from .subscriber import Subscriber
from auth.models.models import User
