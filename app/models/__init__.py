from .country import Country
from .user import User
from .competition import Competition, competition_delegates, competition_organizers
from .api_token import ApiToken
