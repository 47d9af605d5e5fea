from showtime.models.user import User
from showtime.models.theater import Theater
from showtime.models.hall import Hall
from showtime.models.movie import Movie
from showtime.models.show import Show
