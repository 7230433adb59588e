SEGMENTATION_METHODS = ("whitespace", "wordpunct", "tinysegmenter")
