# examples/demo_pipeline.py
import random

from cg2d.pipeline import convex_hull_2d

if __name__ == "__main__":
    rng = random.Random(7)
    cloud = [(rng.randint(-50, 50), rng.randint(-50, 50)) for _ in range(200)]

    ours = convex_hull_2d(cloud, backend="internal")
    qhull = convex_hull_2d(cloud, backend="scipy")  # або "internal"
    print("Vertices (internal):", len(ours))
    print("Vertices (scipy):   ", len(qhull))
    print("Same hull:", ours == qhull)
