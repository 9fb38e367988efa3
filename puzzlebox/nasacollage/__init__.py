"""Search for rectangular collages of images and write them as PNG files."""