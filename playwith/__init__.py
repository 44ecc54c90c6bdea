"""Find the games a group of Steam players have in common."""
