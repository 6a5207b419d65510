"""Qt-free game model: maze generation, sessions, progression."""
