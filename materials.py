from utils import vec

class Material:

    def __init__(self, color=None, k_d=0.2, k_s=0.2, p=10.):
        """
        Create a new material with the given parameters.

        Parameters:
          color : (3,) -- Surface color, also used for the ambient term
          k_d : float -- Diffuse coefficient
          k_s : float -- Specular coefficient
          p : float -- Specular exponent (shininess), how wide the reflection is
        """
        if color is None:
            color = vec([0.75, 0.125, 0.125])
        self.color = color
        self.k_d = k_d
        self.k_s = k_s
        self.p = p
