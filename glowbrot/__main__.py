from glowbrot.mandelbrot_viewer import main

main()
