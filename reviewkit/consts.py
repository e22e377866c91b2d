# Seeded demo restaurant rated when the CLI runs without a subcommand
DEMO_RESTAURANT_NAME = "Cheesegaddon"
DEMO_FOOD_QUALITY = 5
DEMO_ENVIRONMENT = 3
DEMO_LOCATION = 2

# Output lines (bit-exact)
RESTAURANT_RATING_TEMPLATE = "Restaurant {name} final rate is: {rating} stars"
DISH_RATING_TEMPLATE = "Dish {name} final rate is: {rating} stars"

# Weight sets must sum to 1.0 within this tolerance
WEIGHT_SUM_TOLERANCE = 0.001

# Float noise below this precision is dropped before rounding a weighted sum
ROUNDING_PRECISION_DIGITS = 9

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
