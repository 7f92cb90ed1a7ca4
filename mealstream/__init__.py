"""MealStream: food-friendly content scoring and ranking."""
