# Import every model so Base.metadata knows all tables before create_all
from showtime.db.session import Base
from showtime.models.user import User
from showtime.models.theater import Theater
from showtime.models.hall import Hall
from showtime.models.movie import Movie
from showtime.models.show import Show
