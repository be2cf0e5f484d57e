from PIL import Image as PIM
import numpy as np

# resolution written into encoded files, in pixels per inch
DEFAULT_PPI = 80;

class Image(object):
    """Image

    An 8 bit RGB pixel buffer addressed by (x, y). Rows are stored bottom-up:
    row 0 is the bottom of the picture, the way BMP files lay them out.
    """

    def __init__(self, path=None, pixels=None):
        # You can do Image(pixels=...) or Image(path)
        self._pixels = None;
        self.file_path = path;
        self.pixels = pixels;
        if(self.file_path is not None and pixels is None):
            self.loadImageData(self.file_path);

    @property
    def pixels(self):
        return self._pixels;

    @pixels.setter
    def pixels(self, data):
        if (data is not None):
            data = np.asarray(data).astype(np.uint8);
        self._pixels = data;

    @property
    def dtype(self):
        return self.pixels.dtype;

    @property
    def shape(self):
        return np.asarray(self.pixels.shape)[:];

    @property
    def width(self):
        return self.shape[1];

    @property
    def height(self):
        return self.shape[0];

    def clear(self, color=None):
        if (color is None):
            color = [0, 0, 0];
        self.pixels[:] = color;

    def getPixel(self, x, y):
        return self.pixels[y, x];

    def setPixel(self, x, y, color):
        self.pixels[y, x] = color;

    def loadImageData(self, path=None):
        if (path):
            self.file_path = path;
        if (self.file_path):
            with PIM.open(fp=self.file_path) as pim:
                self.pixels = np.array(pim.convert('RGB'))[::-1, :, :];

    @staticmethod
    def SolidRGBPixels(shape, color=None):
        if (color is None):
            color = [0, 0, 0];
        rblock = np.zeros((shape[0], shape[1], 3), dtype=np.uint8);
        rblock[:] = color;
        return rblock;

    @classmethod
    def SolidImage(cls, shape, color=None):
        return cls(pixels=cls.SolidRGBPixels(shape, color));

    def PIL(self):
        # PIL wants the top row first
        return PIM.fromarray(np.ascontiguousarray(self.pixels[::-1, :, :]));

    def writeToFile(self, output_path=None, ppi=None, **kwargs):
        """Encode the buffer as a 24 bit BMP.

        output_path can be a file name or a file object opened for binary
        writing. ppi is the resolution stored in the file header.
        """
        if (ppi is None):
            ppi = DEFAULT_PPI;
        self.PIL().save(output_path, format='BMP', dpi=(ppi, ppi), **kwargs);
