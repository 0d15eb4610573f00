from rtkit.util.token import Token
from rtkit.util.buffer import GrowthBuffer
