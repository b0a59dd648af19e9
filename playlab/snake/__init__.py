"""Snake game: board positions, the snake, game rules and a terminal front end."""