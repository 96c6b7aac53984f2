"""Small side-effect free helpers shared by adapter components."""
