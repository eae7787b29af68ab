"""Playfield dimensions and gameplay constants."""

# Whole drawing surface
W = 550
H = 650

# Player ship
PLAYERLASERS = 3
NUMLIVES = 3
PLAYERSPEED = 4
PLASERSPEED = 6
ALIENSPEED = 9

# Alien lasers
FIREY = H // 3
ALASERSPEED = 6

# Alien spacing
FLAGSTART1 = 160
FLAGSTART2 = 280
PURPSTART = 27
REDSTART = PURPSTART * 2 - 9
SPACING = 40
COLSPACE = 34

# Aqua aliens
NUMAQUA = 10
AQUAROWS = 3
AQUASCORE = 30

# Purple aliens
NUMPURP = 8
PURPSCORE = 40

# Red aliens
NUMRED = 6
REDSCORE = 50

# Flagships: an attacking flagship scores 150, the rest score double
NUMFLAG = 2
FLAGSCORE = 60

# Background stars
NUM_STARS = 50