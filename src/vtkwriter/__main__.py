from vtkwriter.cli import app

app(prog_name="vtkwriter")
