from cg2d.hull import ConvexHull2D

if __name__ == "__main__":
    raw = [
        (0,3), (1,1), (2,2), (4,4), (0,0),
        (1,2), (4,1), (3,3), (0,2), (4,2)
    ]
    hull = ConvexHull2D(raw)
    print(hull.to_text())

    report = hull.validate()
    print("VALIDATION:", report)
