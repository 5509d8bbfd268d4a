import tkinter as tk

import numpy as np
from PIL import Image, ImageTk


class FractalUI(tk.Frame):
    def __init__(self, parent, pixels: np.ndarray, title: str = "mandelbrot"):
        tk.Frame.__init__(self, parent)
        self.parent = parent
        self.parent.title(title)

        height, width = pixels.shape[:2]
        self.image_canvas = tk.Canvas(self, width=width, height=height, highlightthickness=0)
        self.image_canvas.pack(side=tk.LEFT, expand=True, fill=tk.BOTH)
        self.image = None

        self.pack(fill=tk.BOTH, expand=True)
        self.draw(pixels)

    def set_image(self, image):
        self.image = image
        tk_image = ImageTk.PhotoImage(image)
        self.canvas_image = self.image_canvas.create_image(
            0, 0, image=tk_image, anchor=tk.NW
        )
        # tkinter doesn't hold a reference to the image
        self.image_canvas.image = tk_image

    def draw(self, pixels):
        self.set_image(Image.fromarray(pixels, "RGB"))


def run(pixels: np.ndarray, title: str = "mandelbrot"):
    root = tk.Tk()
    height, width = pixels.shape[:2]
    FractalUI(parent=root, pixels=pixels, title=title)
    root.geometry("{}x{}".format(width, height))
    root.resizable(False, False)
    root.mainloop()
